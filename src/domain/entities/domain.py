"""
Domain Entity

Custom hostname owned by an organization.
"""

from sqlmodel import Field

from src.domain.base import BaseRecord


class Domain(BaseRecord, table=True):
    __tablename__ = "domains"

    organization_id: int = Field(foreign_key="organizations.id", index=True)
    domain: str = Field(unique=True, index=True, max_length=253)
    verified: bool = Field(default=False)
