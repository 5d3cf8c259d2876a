"""
User Access Use Cases

Attach roles and direct permissions to a user, and read back the resolved
access of a user.
"""

from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit
from src.libs.result import Error, Result, Return
from .access import ensure_role, resolve_access
from .dtos import UserAccessResponse


class AssignUserRoleUseCase:
    """
    Attach a role to a user.

    Errors:
        - USER_NOT_FOUND
        - ROLE_NOT_FOUND
        - CONSTRAINT_VIOLATION: role already attached
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], user_id: int, role_name: str
    ) -> Result[UserAccessResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role = await ensure_role(self.uow, role_name)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", f"Role not found: {role_name}"))

            try:
                await self.uow.users.add_role(user.id, role.id)
                await record_audit(
                    self.uow, actor_id, "assign_role", user, {"role": role.name}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            user = await self.uow.users.get_with_roles(user_id)
            role, roles, permissions = resolve_access(user)
            return Return.ok(
                UserAccessResponse(
                    user_id=user_id, role=role, roles=roles, permissions=permissions
                )
            )


class GrantUserPermissionUseCase:
    """
    Grant a permission directly to a user.

    Errors:
        - USER_NOT_FOUND
        - PERMISSION_NOT_FOUND
        - CONSTRAINT_VIOLATION: permission already granted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], user_id: int, permission_name: str
    ) -> Result[UserAccessResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            permission = await self.uow.permissions.get_by_name(permission_name)
            if permission is None:
                return Return.err(
                    Error("PERMISSION_NOT_FOUND", f"Permission not found: {permission_name}")
                )

            try:
                await self.uow.users.add_permission(user.id, permission.id)
                await record_audit(
                    self.uow,
                    actor_id,
                    "grant_permission",
                    user,
                    {"permission": permission.name},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            user = await self.uow.users.get_with_roles(user_id)
            role, roles, permissions = resolve_access(user)
            return Return.ok(
                UserAccessResponse(
                    user_id=user_id, role=role, roles=roles, permissions=permissions
                )
            )


class GetUserAccessUseCase:
    """Resolve the token role and effective permissions of a user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserAccessResponse]:
        async with self.uow:
            user = await self.uow.users.get_with_roles(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            role, roles, permissions = resolve_access(user)
            return Return.ok(
                UserAccessResponse(
                    user_id=user_id, role=role, roles=roles, permissions=permissions
                )
            )
