from typing import List

from sqlmodel import col, select

from src.adapter.repositories.base_repository import (
    SqlModelAppendOnlyRepository,
    SqlModelRepository,
)
from src.app.repositories.billing_repository import (
    IFeatureRepository,
    IPaymentTransactionRepository,
    ISubscriptionPlanRepository,
    ISubscriptionRepository,
)
from src.domain.entities import (
    Feature,
    PaymentTransaction,
    PlanFeatureLink,
    Subscription,
    SubscriptionPlan,
)


class SubscriptionRepository(SqlModelRepository[Subscription], ISubscriptionRepository):
    """Subscription repository implementation using SQLModel"""

    model = Subscription


class SubscriptionPlanRepository(
    SqlModelRepository[SubscriptionPlan], ISubscriptionPlanRepository
):
    """SubscriptionPlan repository implementation using SQLModel"""

    model = SubscriptionPlan

    async def add_feature(self, plan_id: int, feature_id: int) -> None:
        await self._link(
            PlanFeatureLink(subscription_plan_id=plan_id, feature_id=feature_id)
        )

    async def get_features(self, plan_id: int) -> List[Feature]:
        stmt = (
            select(Feature)
            .join(PlanFeatureLink, PlanFeatureLink.feature_id == Feature.id)
            .where(PlanFeatureLink.subscription_plan_id == plan_id)
            .where(col(Feature.deleted_at).is_(None))
            .order_by(col(Feature.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())


class FeatureRepository(SqlModelRepository[Feature], IFeatureRepository):
    """Feature repository implementation using SQLModel"""

    model = Feature


class PaymentTransactionRepository(
    SqlModelAppendOnlyRepository[PaymentTransaction], IPaymentTransactionRepository
):
    """PaymentTransaction repository implementation using SQLModel"""

    model = PaymentTransaction
