"""
API Key API Routes

The key value is returned only by the issuing call. Non-admin callers see
and change only their own keys.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import (
    actor_id,
    ensure_admin_or_self,
    is_admin,
    require_user_or_admin,
)
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    APIKeyResponse,
    IssueAPIKeyCommand,
    IssueAPIKeyUseCase,
    IssuedAPIKeyResponse,
    TouchAPIKeyUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import APIKey

router = APIRouter(prefix="/api-keys", tags=["API Key"])


class IssueAPIKeyRequest(BaseModel):
    organization_id: int
    user_id: Optional[int] = Field(None, description="Owner; defaults to the caller")
    name: str = Field("", max_length=255)
    permissions: Optional[List[str]] = None
    expires_at: Optional[datetime] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=IssuedAPIKeyResponse)
async def issue_api_key(
    request: IssueAPIKeyRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Issue API Key

    Users issue keys for themselves; admins may issue for anyone.

    Raises:
        - 401 Unauthorized: issuing for another user without admin role
        - 404 Not Found: USER_NOT_FOUND, ORGANIZATION_NOT_FOUND
        - 409 Conflict: CONSTRAINT_VIOLATION
    """
    owner_id = request.user_id if request.user_id is not None else actor_id(claims)
    ensure_admin_or_self(claims, owner_id)

    command = IssueAPIKeyCommand(
        user_id=owner_id,
        organization_id=request.organization_id,
        name=request.name,
        permissions=request.permissions,
        expires_at=request.expires_at,
    )

    use_case = IssueAPIKeyUseCase(uow)
    result = await use_case.execute(actor_id(claims), command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/{api_key_id}/touch", status_code=status.HTTP_200_OK, response_model=APIKeyResponse)
async def touch_api_key(
    api_key_id: int,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Touch API Key

    Sets last_used_at to now. Users may only touch their own keys.

    Raises:
        - 401 Unauthorized: key owned by another user without admin role
        - 404 Not Found: API_KEY_NOT_FOUND
    """
    owner_id = None if is_admin(claims) else actor_id(claims)

    use_case = TouchAPIKeyUseCase(uow)
    result = await use_case.execute(api_key_id, owner_id=owner_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateAPIKeyRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    permissions: Optional[List[str]] = None
    expires_at: Optional[datetime] = None


register_crud_routes(
    router,
    repository="api_keys",
    entity_type=APIKey,
    response_model=APIKeyResponse,
    not_found_code="API_KEY_NOT_FOUND",
    update_model=UpdateAPIKeyRequest,
    scope_field="organization_id",
    owner_field="user_id",
    operations=("get", "list", "update", "delete"),
)
