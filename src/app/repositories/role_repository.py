from abc import abstractmethod
from typing import List, Optional

from src.app.repositories.base_repository import ICrudRepository
from src.domain.entities import Permission, Role


class IRoleRepository(ICrudRepository[Role]):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get live role by name"""
        pass

    @abstractmethod
    async def add_permission(self, role_id: int, permission_id: int) -> None:
        """Grant a permission to a role"""
        pass

    @abstractmethod
    async def get_permissions(self, role_id: int) -> List[Permission]:
        """Live permissions granted to a role"""
        pass


class IPermissionRepository(ICrudRepository[Permission]):
    """Permission repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Permission]:
        """Get live permission by name"""
        pass
