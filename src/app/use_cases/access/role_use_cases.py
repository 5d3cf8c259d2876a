"""
Role Use Cases

Roles are named permission bundles. Role names are unique; the reserved
"admin" and "user" names drive token roles at login.
"""

from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit
from src.domain.entities import Role
from src.libs.result import Error, Result, Return
from .dtos import RoleDetailResponse


async def to_role_response(uow: UnitOfWork, role: Role) -> RoleDetailResponse:
    permissions = await uow.roles.get_permissions(role.id)
    return RoleDetailResponse(
        id=role.id,
        name=role.name,
        permissions=[permission.name for permission in permissions],
        created_at=role.created_at,
        updated_at=role.updated_at,
        deleted_at=role.deleted_at,
    )


class GetRoleUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, role_id: int, include_deleted: bool = False
    ) -> Result[RoleDetailResponse]:
        async with self.uow:
            role = await self.uow.roles.get_by_id(role_id, include_deleted=include_deleted)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))
            return Return.ok(await to_role_response(self.uow, role))


class AddRolePermissionUseCase:
    """
    Grant a permission to a role.

    Errors:
        - ROLE_NOT_FOUND
        - PERMISSION_NOT_FOUND
        - CONSTRAINT_VIOLATION: permission already granted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], role_id: int, permission_name: str
    ) -> Result[RoleDetailResponse]:
        async with self.uow:
            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))

            permission = await self.uow.permissions.get_by_name(permission_name)
            if permission is None:
                return Return.err(
                    Error("PERMISSION_NOT_FOUND", f"Permission not found: {permission_name}")
                )

            try:
                await self.uow.roles.add_permission(role.id, permission.id)
                await record_audit(
                    self.uow,
                    actor_id,
                    "grant_permission",
                    role,
                    {"permission": permission.name},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(await to_role_response(self.uow, role))
