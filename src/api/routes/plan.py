"""
Subscription Plan and Feature API Routes

Pricing catalog. Writes require admin.
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
from src.app.use_cases.billing import (
    AddPlanFeatureUseCase,
    FeatureResponse,
    GetSubscriptionPlanUseCase,
    SubscriptionPlanDetailResponse,
    SubscriptionPlanResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import Feature, SubscriptionPlan

router = APIRouter(prefix="/subscription-plans", tags=["Subscription Plan"])
feature_router = APIRouter(prefix="/features", tags=["Feature"])


@router.get(
    "/{plan_id}",
    status_code=status.HTTP_200_OK,
    response_model=SubscriptionPlanDetailResponse,
)
async def get_plan(
    plan_id: int,
    include_deleted: bool = Query(False),
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Plan with its live features"""
    ensure_include_deleted_allowed(claims, include_deleted)

    use_case = GetSubscriptionPlanUseCase(uow)
    result = await use_case.execute(plan_id, include_deleted=include_deleted)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class PlanFeatureRequest(BaseModel):
    feature_id: int


@router.post(
    "/{plan_id}/features",
    status_code=status.HTTP_200_OK,
    response_model=SubscriptionPlanDetailResponse,
)
async def add_plan_feature(
    plan_id: int,
    request: PlanFeatureRequest,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Include a feature in a plan (admin)

    Raises:
        - 404 Not Found: SUBSCRIPTION_PLAN_NOT_FOUND, FEATURE_NOT_FOUND
        - 409 Conflict: CONSTRAINT_VIOLATION (already included)
    """
    use_case = AddPlanFeatureUseCase(uow)
    result = await use_case.execute(actor_id(claims), plan_id, request.feature_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class CreatePlanRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: float = Field(0.0, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    interval: str = Field("month", max_length=20)


class UpdatePlanRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    interval: Optional[str] = Field(None, max_length=20)


register_crud_routes(
    router,
    repository="subscription_plans",
    entity_type=SubscriptionPlan,
    response_model=SubscriptionPlanResponse,
    not_found_code="SUBSCRIPTION_PLAN_NOT_FOUND",
    create_model=CreatePlanRequest,
    update_model=UpdatePlanRequest,
    write_gate=require_admin,
    operations=("create", "list", "update", "delete"),
)


class CreateFeatureRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class UpdateFeatureRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


register_crud_routes(
    feature_router,
    repository="features",
    entity_type=Feature,
    response_model=FeatureResponse,
    not_found_code="FEATURE_NOT_FOUND",
    create_model=CreateFeatureRequest,
    update_model=UpdateFeatureRequest,
    write_gate=require_admin,
)
