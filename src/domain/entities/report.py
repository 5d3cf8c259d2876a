"""
Report Entity

Stored query definition delivered to recipients on a schedule.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field

from src.domain.base import BaseRecord


class Report(BaseRecord, table=True):
    __tablename__ = "reports"

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    query: str
    organization_id: int = Field(foreign_key="organizations.id", index=True)
    creator_id: Optional[int] = Field(default=None, foreign_key="users.id")
    schedule: Optional[str] = Field(default=None, max_length=100)  # cron expression
    recipients: Optional[list] = Field(default=None, sa_column=Column(JSON))
    last_run_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
