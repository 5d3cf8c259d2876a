"""
User Entity

Represents a person who can belong to multiple organizations.
"""

from typing import Optional, TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.domain.base import BaseRecord
from .links import UserOrganizationLink, UserPermissionLink, UserRoleLink

if TYPE_CHECKING:
    from .activity_log import ActivityLog
    from .notification_preference import NotificationPreference
    from .organization import Organization
    from .permission import Permission
    from .role import Role
    from .seat import Seat


class User(BaseRecord, table=True):
    """
    User entity - a person who can belong to multiple organizations.

    Business Rules:
    - Email must be unique across all users
    - Only the bcrypt hash of the password is stored; the plaintext never
      reaches a column (see src.domain.lifecycle)
    - verification_code is issued on creation and cleared once verified;
      response DTOs never carry it
    """

    __tablename__ = "users"

    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(default="", max_length=60)  # Bcrypt output is 60 chars
    name: str = Field(default="", max_length=255)

    verification_code: Optional[str] = Field(default=None, index=True, max_length=64)
    verified: bool = Field(default=False)

    locale: Optional[str] = Field(default=None, max_length=16)
    timezone: Optional[str] = Field(default=None, max_length=64)
    language: Optional[str] = Field(default=None, max_length=16)

    # Relationships
    roles: list["Role"] = Relationship(link_model=UserRoleLink)
    organizations: list["Organization"] = Relationship(
        back_populates="users", link_model=UserOrganizationLink
    )
    permissions: list["Permission"] = Relationship(link_model=UserPermissionLink)
    seats: list["Seat"] = Relationship()
    activity_logs: list["ActivityLog"] = Relationship()
    notification_prefs: Optional["NotificationPreference"] = Relationship(
        sa_relationship_kwargs={"uselist": False}
    )
