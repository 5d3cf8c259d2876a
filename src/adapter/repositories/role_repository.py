from typing import List, Optional

from sqlmodel import col, select

from src.adapter.repositories.base_repository import SqlModelRepository
from src.app.repositories.role_repository import IPermissionRepository, IRoleRepository
from src.domain.entities import Permission, Role, RolePermissionLink


class RoleRepository(SqlModelRepository[Role], IRoleRepository):
    """Role repository implementation using SQLModel"""

    model = Role

    async def get_by_name(self, name: str) -> Optional[Role]:
        stmt = self._select().where(Role.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def add_permission(self, role_id: int, permission_id: int) -> None:
        await self._link(RolePermissionLink(role_id=role_id, permission_id=permission_id))

    async def get_permissions(self, role_id: int) -> List[Permission]:
        stmt = (
            select(Permission)
            .join(RolePermissionLink, RolePermissionLink.permission_id == Permission.id)
            .where(RolePermissionLink.role_id == role_id)
            .where(col(Permission.deleted_at).is_(None))
            .order_by(col(Permission.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())


class PermissionRepository(SqlModelRepository[Permission], IPermissionRepository):
    """Permission repository implementation using SQLModel"""

    model = Permission

    async def get_by_name(self, name: str) -> Optional[Permission]:
        stmt = self._select().where(Permission.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()
