"""
User API Routes

Admin-managed users plus self-service profile updates.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.auth import (
    actor_id,
    ensure_admin_or_self,
    is_admin,
    require_admin,
    require_user_or_admin,
    unauthorized,
)
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    AssignUserRoleUseCase,
    CreateUserCommand,
    CreateUserUseCase,
    GetUserAccessUseCase,
    GrantUserPermissionUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserAccessResponse,
    UserResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import User

router = APIRouter(prefix="/users", tags=["User"])


class CreateUserRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: Optional[str] = Field(None, min_length=8, description="Initial password")
    name: str = Field("", max_length=255)
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None
    role_names: List[str] = Field(default_factory=list, description="Roles to attach")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
)
async def create_user(
    request: CreateUserRequest,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create User (admin)

    Raises:
        - 401 Unauthorized: caller is not an admin
        - 409 Conflict: EMAIL_ALREADY_EXISTS, CONSTRAINT_VIOLATION
        - 404 Not Found: ROLE_NOT_FOUND
        - 400 Bad Request: CREDENTIAL_ERROR
    """
    command = CreateUserCommand(**request.model_dump())

    use_case = CreateUserUseCase(uow)
    result = await use_case.execute(actor_id(claims), command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateUserRequest(BaseModel):
    """Partial update; the password is rehashed only when present"""

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    name: Optional[str] = Field(None, max_length=255)
    verified: Optional[bool] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Users may update their own profile; admins may update anyone. Only
    admins may change the verified flag.

    Raises:
        - 401 Unauthorized: not self or admin
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 400 Bad Request: CREDENTIAL_ERROR
    """
    ensure_admin_or_self(claims, user_id)
    if "verified" in request.model_fields_set and not is_admin(claims):
        raise unauthorized()

    command = UpdateUserCommand(**request.model_dump(exclude_unset=True))

    use_case = UpdateUserUseCase(uow)
    result = await use_case.execute(actor_id(claims), user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RoleAssignmentRequest(BaseModel):
    role_name: str = Field(..., min_length=1)


@router.post(
    "/{user_id}/roles",
    status_code=status.HTTP_200_OK,
    response_model=UserAccessResponse,
)
async def assign_role(
    user_id: int,
    request: RoleAssignmentRequest,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Attach a role to a user (admin)"""
    use_case = AssignUserRoleUseCase(uow)
    result = await use_case.execute(actor_id(claims), user_id, request.role_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class PermissionGrantRequest(BaseModel):
    permission_name: str = Field(..., min_length=1)


@router.post(
    "/{user_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=UserAccessResponse,
)
async def grant_permission(
    user_id: int,
    request: PermissionGrantRequest,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Grant a permission directly to a user (admin)"""
    use_case = GrantUserPermissionUseCase(uow)
    result = await use_case.execute(actor_id(claims), user_id, request.permission_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{user_id}/access",
    status_code=status.HTTP_200_OK,
    response_model=UserAccessResponse,
)
async def get_access(
    user_id: int,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Resolved role and effective permissions of a user (self or admin)"""
    ensure_admin_or_self(claims, user_id)

    use_case = GetUserAccessUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


register_crud_routes(
    router,
    repository="users",
    entity_type=User,
    response_model=UserResponse,
    not_found_code="USER_NOT_FOUND",
    operations=("get", "list", "delete"),
)
