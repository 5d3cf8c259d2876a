"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    token_type: str = "bearer"
    user_id: int
    role: str
    permissions: List[str]


class VerifyUserResponse(BaseModel):
    """Response for verification code use case"""

    status: str
    user_id: int


class BootstrapAdminResponse(BaseModel):
    """Response for default admin bootstrap"""

    created: bool
    user_id: Optional[int] = None
