from datetime import UTC, datetime
from typing import Optional

from sqlmodel import DateTime, Field, SQLModel


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored."""
    return datetime.now(UTC).replace(tzinfo=None)


class BaseRecord(SQLModel):
    """
    Fields shared by every persisted entity.

    deleted_at is the soft-delete marker: a row with deleted_at set is hidden
    from default reads but stays in storage.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    deleted_at: Optional[datetime] = Field(default=None, index=True, sa_type=DateTime)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
