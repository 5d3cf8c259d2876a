"""
Subscription Plan Use Cases

Plans bundle catalog features.
"""

from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit
from src.domain.entities import SubscriptionPlan
from src.libs.result import Error, Result, Return
from .dtos import FeatureResponse, SubscriptionPlanDetailResponse, SubscriptionPlanResponse


async def to_plan_response(
    uow: UnitOfWork, plan: SubscriptionPlan
) -> SubscriptionPlanDetailResponse:
    features = await uow.subscription_plans.get_features(plan.id)
    summary = SubscriptionPlanResponse.model_validate(plan, from_attributes=True)
    return SubscriptionPlanDetailResponse(
        **summary.model_dump(),
        features=[
            FeatureResponse.model_validate(feature, from_attributes=True)
            for feature in features
        ],
    )


class GetSubscriptionPlanUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, plan_id: int, include_deleted: bool = False
    ) -> Result[SubscriptionPlanDetailResponse]:
        async with self.uow:
            plan = await self.uow.subscription_plans.get_by_id(
                plan_id, include_deleted=include_deleted
            )
            if plan is None:
                return Return.err(
                    Error("SUBSCRIPTION_PLAN_NOT_FOUND", "Subscription plan not found")
                )
            return Return.ok(await to_plan_response(self.uow, plan))


class AddPlanFeatureUseCase:
    """
    Include a feature in a plan.

    Errors:
        - SUBSCRIPTION_PLAN_NOT_FOUND
        - FEATURE_NOT_FOUND
        - CONSTRAINT_VIOLATION: feature already included
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], plan_id: int, feature_id: int
    ) -> Result[SubscriptionPlanDetailResponse]:
        async with self.uow:
            plan = await self.uow.subscription_plans.get_by_id(plan_id)
            if plan is None:
                return Return.err(
                    Error("SUBSCRIPTION_PLAN_NOT_FOUND", "Subscription plan not found")
                )

            feature = await self.uow.features.get_by_id(feature_id)
            if feature is None:
                return Return.err(Error("FEATURE_NOT_FOUND", "Feature not found"))

            try:
                await self.uow.subscription_plans.add_feature(plan.id, feature.id)
                await record_audit(
                    self.uow, actor_id, "add_feature", plan, {"feature": feature.name}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(await to_plan_response(self.uow, plan))
