"""
Access Use Case DTOs (Data Transfer Objects)

Roles, permissions, API keys and notification preferences.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class IssueAPIKeyCommand(BaseModel):
    user_id: int
    organization_id: int
    name: str = ""
    permissions: Optional[List[str]] = None
    expires_at: Optional[datetime] = None


class RoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class RoleDetailResponse(RoleResponse):
    """Role with the names of its live permissions"""

    permissions: List[str] = []


class PermissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class APIKeyResponse(BaseModel):
    """API key without its secret value"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    organization_id: int
    name: str
    permissions: Optional[List[str]] = None
    expires_at: Optional[datetime] = None
    last_used_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class IssuedAPIKeyResponse(APIKeyResponse):
    """Returned once, on issuance: the only response carrying the key"""

    key: str


class NotificationPreferenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    email_enabled: bool
    sms_enabled: bool
    in_app_enabled: bool
    billing_emails: bool
    product_emails: bool
    marketing_emails: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
