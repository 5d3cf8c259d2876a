from abc import abstractmethod
from typing import List

from src.app.repositories.base_repository import IAppendOnlyRepository, ICrudRepository
from src.domain.entities import (
    Feature,
    PaymentTransaction,
    Subscription,
    SubscriptionPlan,
)


class ISubscriptionRepository(ICrudRepository[Subscription]):
    """Subscription repository interface - application layer"""


class ISubscriptionPlanRepository(ICrudRepository[SubscriptionPlan]):
    """SubscriptionPlan repository interface - application layer"""

    @abstractmethod
    async def add_feature(self, plan_id: int, feature_id: int) -> None:
        """Include a feature in a plan"""
        pass

    @abstractmethod
    async def get_features(self, plan_id: int) -> List[Feature]:
        """Live features included in a plan"""
        pass


class IFeatureRepository(ICrudRepository[Feature]):
    """Feature repository interface - application layer"""


class IPaymentTransactionRepository(IAppendOnlyRepository[PaymentTransaction]):
    """PaymentTransaction repository interface - immutable records"""
