"""
Organization API Routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, require_user_or_admin
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import ParentRef
from src.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    OrganizationResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import Organization, OrganizationSettings

router = APIRouter(prefix="/organizations", tags=["Organization"])


class CreateOrganizationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    subscription_plan_id: Optional[int] = None
    settings: Optional[OrganizationSettings] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrganizationResponse)
async def create_organization(
    request: CreateOrganizationRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    The caller becomes a member of the new organization and gets an active
    seat in it, committed together with the organization.

    Raises:
        - 404 Not Found: SUBSCRIPTION_PLAN_NOT_FOUND, USER_NOT_FOUND
        - 409 Conflict: CONSTRAINT_VIOLATION
    """
    command = CreateOrganizationCommand(
        name=request.name,
        subscription_plan_id=request.subscription_plan_id,
        settings=request.settings,
        creator_id=actor_id(claims),
    )

    use_case = CreateOrganizationUseCase(uow)
    result = await use_case.execute(actor_id(claims), command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateOrganizationRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    subscription_plan_id: Optional[int] = None
    settings: Optional[OrganizationSettings] = None


register_crud_routes(
    router,
    repository="organizations",
    entity_type=Organization,
    response_model=OrganizationResponse,
    not_found_code="ORGANIZATION_NOT_FOUND",
    update_model=UpdateOrganizationRequest,
    parents=(
        ParentRef(
            "subscription_plan_id",
            "subscription_plans",
            "SUBSCRIPTION_PLAN_NOT_FOUND",
            required=False,
        ),
    ),
    operations=("get", "list", "update", "delete"),
)
