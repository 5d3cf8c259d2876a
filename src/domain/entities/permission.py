"""
Permission Entity

Named capability granted through roles or directly to users.
"""

from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseRecord


class Permission(BaseRecord, table=True):
    __tablename__ = "permissions"

    name: str = Field(unique=True, index=True, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
