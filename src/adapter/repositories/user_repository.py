from typing import Optional

from sqlalchemy.orm import selectinload

from src.adapter.repositories.base_repository import SqlModelRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import (
    Role,
    User,
    UserOrganizationLink,
    UserPermissionLink,
    UserRoleLink,
)


class UserRepository(SqlModelRepository[User], IUserRepository):
    """User repository implementation using SQLModel"""

    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get live user by email address"""
        stmt = self._select().where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_verification_code(self, code: str) -> Optional[User]:
        """Get live user by verification code"""
        stmt = self._select().where(User.verification_code == code)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_roles(self, user_id: int) -> Optional[User]:
        """Get live user with roles, role permissions and direct permissions loaded"""
        stmt = (
            self._select()
            .where(User.id == user_id)
            .options(
                selectinload(User.roles).selectinload(Role.permissions),
                selectinload(User.permissions),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def add_role(self, user_id: int, role_id: int) -> None:
        await self._link(UserRoleLink(user_id=user_id, role_id=role_id))

    async def add_permission(self, user_id: int, permission_id: int) -> None:
        await self._link(UserPermissionLink(user_id=user_id, permission_id=permission_id))

    async def add_organization(self, user_id: int, organization_id: int) -> None:
        await self._link(
            UserOrganizationLink(user_id=user_id, organization_id=organization_id)
        )
