"""
Role and Permission API Routes

Catalog writes require admin; reads are open to any authenticated user.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import (
    actor_id,
    ensure_include_deleted_allowed,
    require_admin,
    require_user_or_admin,
)
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    AddRolePermissionUseCase,
    GetRoleUseCase,
    PermissionResponse,
    RoleDetailResponse,
    RoleResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import Permission, Role

router = APIRouter(prefix="/roles", tags=["Role"])
permission_router = APIRouter(prefix="/permissions", tags=["Permission"])


class RoleRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


@router.get("/{role_id}", status_code=status.HTTP_200_OK, response_model=RoleDetailResponse)
async def get_role(
    role_id: int,
    include_deleted: bool = Query(False),
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Role with its live permissions"""
    ensure_include_deleted_allowed(claims, include_deleted)

    use_case = GetRoleUseCase(uow)
    result = await use_case.execute(role_id, include_deleted=include_deleted)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RolePermissionRequest(BaseModel):
    permission_name: str = Field(..., min_length=1)


@router.post(
    "/{role_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=RoleDetailResponse,
)
async def add_role_permission(
    role_id: int,
    request: RolePermissionRequest,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Grant a permission to a role (admin)

    Raises:
        - 404 Not Found: ROLE_NOT_FOUND, PERMISSION_NOT_FOUND
        - 409 Conflict: CONSTRAINT_VIOLATION (already granted)
    """
    use_case = AddRolePermissionUseCase(uow)
    result = await use_case.execute(actor_id(claims), role_id, request.permission_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


register_crud_routes(
    router,
    repository="roles",
    entity_type=Role,
    response_model=RoleResponse,
    not_found_code="ROLE_NOT_FOUND",
    create_model=RoleRequest,
    update_model=RoleRequest,
    write_gate=require_admin,
    operations=("create", "list", "update", "delete"),
)


class CreatePermissionRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class UpdatePermissionRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


register_crud_routes(
    permission_router,
    repository="permissions",
    entity_type=Permission,
    response_model=PermissionResponse,
    not_found_code="PERMISSION_NOT_FOUND",
    create_model=CreatePermissionRequest,
    update_model=UpdatePermissionRequest,
    write_gate=require_admin,
)
