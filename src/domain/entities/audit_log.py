"""
AuditLog Entity

Append-only record of state-changing actions.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from sqlmodel import JSON, Column, DateTime, Field, Index

from src.domain.base import BaseRecord, utcnow


class FieldChange(BaseModel):
    """Before/after value of one field in an audit entry"""

    old: Any = None
    new: Any = None


class AuditLog(BaseRecord, table=True):
    """
    AuditLog entity - durable record of a state-changing action.

    Business Rules:
    - Immutable (never updated or deleted)
    - Survives soft deletion of its subject; resource_id may then point at a
      hidden row
    - changes maps field name -> FieldChange for updates, holds the created
      fields under "created" for creations
    """

    __tablename__ = "audit_logs"

    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    organization_id: Optional[int] = Field(default=None, foreign_key="organizations.id")

    action: str = Field(max_length=100)  # e.g., "create", "update", "delete"
    resource_type: str = Field(max_length=100)
    resource_id: Optional[int] = None
    timestamp: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    changes: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    __table_args__ = (
        Index("idx_audit_log_org_timestamp", "organization_id", "timestamp"),
        Index("idx_audit_log_resource", "resource_type", "resource_id"),
        Index("idx_audit_log_user", "user_id"),
    )
