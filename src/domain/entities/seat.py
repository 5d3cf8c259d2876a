"""
Seat Entity

Binds a user to an organization with its own role set.
"""

from typing import TYPE_CHECKING

from sqlmodel import Field, Index, Relationship

from src.domain.base import BaseRecord
from .enums import SeatStatus
from .links import SeatRoleLink

if TYPE_CHECKING:
    from .role import Role


class Seat(BaseRecord, table=True):
    """
    Seat entity - a user's membership within one organization.

    Business Rules:
    - organization_id and user_id must both reference live rows
    - Lifecycle is invited -> active -> inactive (see SEAT_TRANSITIONS)
    """

    __tablename__ = "seats"

    organization_id: int = Field(foreign_key="organizations.id", nullable=False)
    user_id: int = Field(foreign_key="users.id", nullable=False)
    status: SeatStatus = Field(default=SeatStatus.invited)

    roles: list["Role"] = Relationship(link_model=SeatRoleLink)

    __table_args__ = (
        Index("idx_seat_org_user", "organization_id", "user_id"),
        Index("idx_seat_status", "status"),
    )
