"""
Subscription API Routes

Subscription writes and payment recording require admin.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, require_admin, require_user_or_admin
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.billing import (
    CreateSubscriptionCommand,
    CreateSubscriptionUseCase,
    ListPaymentsUseCase,
    PaymentTransactionPageResponse,
    PaymentTransactionResponse,
    RecordPaymentCommand,
    RecordPaymentUseCase,
    SubscriptionResponse,
)
from src.app.use_cases.common import ParentRef
from src.depends import get_unit_of_work
from src.domain.entities import Subscription, SubscriptionStatus

router = APIRouter(prefix="/subscriptions", tags=["Subscription"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubscriptionResponse)
async def create_subscription(
    request: CreateSubscriptionCommand,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Subscription (admin)

    status defaults to "trialing" and start_date to now.

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, SUBSCRIPTION_PLAN_NOT_FOUND
        - 409 Conflict: CONSTRAINT_VIOLATION
    """
    use_case = CreateSubscriptionUseCase(uow)
    result = await use_case.execute(actor_id(claims), request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{subscription_id}/transactions",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentTransactionResponse,
)
async def record_payment(
    subscription_id: int,
    request: RecordPaymentCommand,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Payment Transaction (admin)

    Transactions are immutable; the subscription's status is not changed.

    Raises:
        - 404 Not Found: SUBSCRIPTION_NOT_FOUND
    """
    use_case = RecordPaymentUseCase(uow)
    result = await use_case.execute(actor_id(claims), subscription_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{subscription_id}/transactions",
    status_code=status.HTTP_200_OK,
    response_model=PaymentTransactionPageResponse,
)
async def list_payments(
    subscription_id: int,
    limit: int = Query(50, ge=1, le=100, description="Maximum number of transactions to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Payment Transactions

    Returns:
        - transactions: newest first
        - next_cursor: cursor for the next page (null if no more)
    """
    use_case = ListPaymentsUseCase(uow)
    result = await use_case.execute(subscription_id, limit=limit, cursor=cursor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateSubscriptionRequest(BaseModel):
    subscription_plan_id: Optional[int] = None
    status: Optional[SubscriptionStatus] = None
    end_date: Optional[datetime] = None
    payment_method: Optional[str] = Field(None, max_length=100)
    last_payment_date: Optional[datetime] = None
    next_billing_date: Optional[datetime] = None


register_crud_routes(
    router,
    repository="subscriptions",
    entity_type=Subscription,
    response_model=SubscriptionResponse,
    not_found_code="SUBSCRIPTION_NOT_FOUND",
    update_model=UpdateSubscriptionRequest,
    parents=(
        ParentRef(
            "subscription_plan_id",
            "subscription_plans",
            "SUBSCRIPTION_PLAN_NOT_FOUND",
            required=False,
        ),
    ),
    write_gate=require_admin,
    scope_field="organization_id",
    operations=("get", "list", "update", "delete"),
)
