"""
Authentication Use Cases

Login, verification and admin bootstrap.
"""

from .bootstrap_admin_use_case import BootstrapAdminUseCase
from .dtos import BootstrapAdminResponse, LoginResponse, VerifyUserResponse
from .login_use_case import LoginUseCase
from .verify_user_use_case import VerifyUserUseCase

__all__ = [
    # Use Cases
    "LoginUseCase",
    "VerifyUserUseCase",
    "BootstrapAdminUseCase",
    # DTOs - Responses
    "LoginResponse",
    "VerifyUserResponse",
    "BootstrapAdminResponse",
]
