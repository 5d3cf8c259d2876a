"""
Subscription Use Cases

Subscriptions start as trialing unless told otherwise. Status never changes
on its own: callers update it explicitly.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import Subscription
from src.domain.lifecycle import prepare_new_subscription
from src.libs.result import Error, Result, Return
from .dtos import CreateSubscriptionCommand, SubscriptionResponse

logger = logging.getLogger(__name__)


class CreateSubscriptionUseCase:
    """
    Create a subscription for an organization.

    Business Rules:
    - status defaults to trialing, start_date to now
    - The organization, and the plan when given, must be live rows

    Errors:
        - ORGANIZATION_NOT_FOUND
        - SUBSCRIPTION_PLAN_NOT_FOUND
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: CreateSubscriptionCommand
    ) -> Result[SubscriptionResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            if command.subscription_plan_id is not None:
                plan = await self.uow.subscription_plans.get_by_id(command.subscription_plan_id)
                if plan is None:
                    return Return.err(
                        Error("SUBSCRIPTION_PLAN_NOT_FOUND", "Subscription plan not found")
                    )

            subscription = Subscription(**command.model_dump())
            prepare_new_subscription(subscription)

            try:
                subscription = await self.uow.subscriptions.create(subscription)
                await record_audit(
                    self.uow,
                    actor_id,
                    "create",
                    subscription,
                    {"created": snapshot(subscription)},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            logger.info(
                f"Subscription {subscription.id} created for organization "
                f"{subscription.organization_id} ({subscription.status.value})"
            )
            return Return.ok(
                SubscriptionResponse.model_validate(subscription, from_attributes=True)
            )
