from abc import abstractmethod
from typing import List, Optional

from src.app.repositories.base_repository import ICrudRepository
from src.domain.entities import Domain, Organization, Role, Seat


class IOrganizationRepository(ICrudRepository[Organization]):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_member_ids(self, organization_id: int) -> List[int]:
        """IDs of users associated with an organization"""
        pass


class IDomainRepository(ICrudRepository[Domain]):
    """Domain repository interface - application layer"""


class ISeatRepository(ICrudRepository[Seat]):
    """Seat repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: int, organization_id: int
    ) -> Optional[Seat]:
        """Get live seat binding a user to an organization"""
        pass

    @abstractmethod
    async def add_role(self, seat_id: int, role_id: int) -> None:
        """Attach a role to a seat"""
        pass

    @abstractmethod
    async def get_roles(self, seat_id: int) -> List[Role]:
        """Live roles attached to a seat"""
        pass
