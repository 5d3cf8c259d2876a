"""
APIKey Entity

Long-lived access credential bound to a user and an organization.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field

from src.domain.base import BaseRecord


class APIKey(BaseRecord, table=True):
    """
    APIKey entity - random key issued on creation.

    Business Rules:
    - key is 32 random bytes, base64url encoded; uniqueness is enforced by
      the column constraint only
    - expires_at and last_used_at are managed by callers
    """

    __tablename__ = "api_keys"

    user_id: int = Field(foreign_key="users.id", index=True)
    organization_id: int = Field(foreign_key="organizations.id", index=True)

    key: str = Field(unique=True, index=True, max_length=64)
    name: str = Field(default="", max_length=255)
    permissions: Optional[list] = Field(default=None, sa_column=Column(JSON))

    expires_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    last_used_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
