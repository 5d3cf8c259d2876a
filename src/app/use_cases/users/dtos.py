"""
User Use Case DTOs (Data Transfer Objects)

Commands carry the transient plaintext password; responses never carry the
password hash or the verification code.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


# ============================================================================
# Command DTOs
# ============================================================================


class CreateUserCommand(BaseModel):
    """Create user intent; password is blanked once hashed"""

    email: str
    password: Optional[str] = None
    name: str = ""
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None
    role_names: List[str] = []


class UpdateUserCommand(BaseModel):
    """Partial update; only explicitly set fields are applied"""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    verified: Optional[bool] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """User as exposed over the API"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    verified: bool
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class UserAccessResponse(BaseModel):
    """Roles and effective permissions of a user"""

    user_id: int
    role: str
    roles: List[str]
    permissions: List[str]
