"""
Access Use Cases

Roles, permissions, API keys and notification preferences.
"""

from .api_key_use_cases import IssueAPIKeyUseCase, TouchAPIKeyUseCase
from .dtos import (
    APIKeyResponse,
    IssueAPIKeyCommand,
    IssuedAPIKeyResponse,
    NotificationPreferenceResponse,
    PermissionResponse,
    RoleDetailResponse,
    RoleResponse,
)
from .notification_preference_use_cases import CreateNotificationPreferenceUseCase
from .role_use_cases import AddRolePermissionUseCase, GetRoleUseCase

__all__ = [
    # Use Cases
    "GetRoleUseCase",
    "AddRolePermissionUseCase",
    "IssueAPIKeyUseCase",
    "TouchAPIKeyUseCase",
    "CreateNotificationPreferenceUseCase",
    # DTOs
    "IssueAPIKeyCommand",
    "RoleResponse",
    "RoleDetailResponse",
    "PermissionResponse",
    "APIKeyResponse",
    "IssuedAPIKeyResponse",
    "NotificationPreferenceResponse",
]
