from abc import abstractmethod
from typing import Optional

from src.app.repositories.base_repository import ICrudRepository
from src.domain.entities import User


class IUserRepository(ICrudRepository[User]):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get live user by email address"""
        pass

    @abstractmethod
    async def get_by_verification_code(self, code: str) -> Optional[User]:
        """Get live user by verification code"""
        pass

    @abstractmethod
    async def get_with_roles(self, user_id: int) -> Optional[User]:
        """Get live user with roles, role permissions and direct permissions loaded"""
        pass

    @abstractmethod
    async def add_role(self, user_id: int, role_id: int) -> None:
        """Attach a role to a user"""
        pass

    @abstractmethod
    async def add_permission(self, user_id: int, permission_id: int) -> None:
        """Grant a permission directly to a user"""
        pass

    @abstractmethod
    async def add_organization(self, user_id: int, organization_id: int) -> None:
        """Associate a user with an organization"""
        pass
