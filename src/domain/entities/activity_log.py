"""
ActivityLog Entity

Append-only trail of user activity within an organization.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field, Index

from src.domain.base import BaseRecord, utcnow


class ActivityLog(BaseRecord, table=True):
    """
    ActivityLog entity - immutable user activity entry.

    Business Rules:
    - Immutable (never updated or deleted)
    - activity_metadata stores free-form context (IP, user agent, etc.)
    """

    __tablename__ = "activity_logs"

    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    organization_id: Optional[int] = Field(default=None, foreign_key="organizations.id")

    activity_type: str = Field(max_length=100)  # e.g., "login", "export"
    timestamp: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    activity_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    __table_args__ = (
        Index("idx_activity_log_org_timestamp", "organization_id", "timestamp"),
        Index("idx_activity_log_user", "user_id"),
    )
