"""
User Management Use Cases

All user-related business logic.
"""

from .access import RESERVED_ROLES, ensure_role, resolve_access
from .create_user_use_case import CreateUserUseCase
from .dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    UserAccessResponse,
    UserResponse,
)
from .grant_access_use_case import (
    AssignUserRoleUseCase,
    GetUserAccessUseCase,
    GrantUserPermissionUseCase,
)
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "AssignUserRoleUseCase",
    "GrantUserPermissionUseCase",
    "GetUserAccessUseCase",
    # Access resolution
    "RESERVED_ROLES",
    "ensure_role",
    "resolve_access",
    # DTOs
    "CreateUserCommand",
    "UpdateUserCommand",
    "UserResponse",
    "UserAccessResponse",
]
