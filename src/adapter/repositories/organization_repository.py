from typing import List, Optional

from sqlmodel import col, select

from src.adapter.repositories.base_repository import SqlModelRepository
from src.app.repositories.organization_repository import (
    IDomainRepository,
    IOrganizationRepository,
    ISeatRepository,
)
from src.domain.entities import Domain, Organization, Role, Seat, SeatRoleLink, UserOrganizationLink


class OrganizationRepository(SqlModelRepository[Organization], IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    model = Organization

    async def get_member_ids(self, organization_id: int) -> List[int]:
        stmt = select(UserOrganizationLink.user_id).where(
            UserOrganizationLink.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())


class DomainRepository(SqlModelRepository[Domain], IDomainRepository):
    """Domain repository implementation using SQLModel"""

    model = Domain


class SeatRepository(SqlModelRepository[Seat], ISeatRepository):
    """Seat repository implementation using SQLModel"""

    model = Seat

    async def get_by_user_and_organization(
        self, user_id: int, organization_id: int
    ) -> Optional[Seat]:
        stmt = self._select().where(
            Seat.user_id == user_id, Seat.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def add_role(self, seat_id: int, role_id: int) -> None:
        await self._link(SeatRoleLink(seat_id=seat_id, role_id=role_id))

    async def get_roles(self, seat_id: int) -> List[Role]:
        stmt = (
            select(Role)
            .join(SeatRoleLink, SeatRoleLink.role_id == Role.id)
            .where(SeatRoleLink.seat_id == seat_id)
            .where(col(Role.deleted_at).is_(None))
            .order_by(col(Role.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())
