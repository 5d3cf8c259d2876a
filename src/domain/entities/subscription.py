"""
Subscription Entity

An organization's subscription to a plan.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING

from sqlmodel import DateTime, Field, Index, Relationship

from src.domain.base import BaseRecord
from .enums import SubscriptionStatus

if TYPE_CHECKING:
    from .payment_transaction import PaymentTransaction


class Subscription(BaseRecord, table=True):
    """
    Subscription entity - billing relationship of one organization.

    Business Rules:
    - status defaults to trialing and start_date to the creation time
      (applied by src.domain.lifecycle.prepare_new_subscription)
    - No automatic status transitions; callers update status explicitly
    """

    __tablename__ = "subscriptions"

    organization_id: int = Field(foreign_key="organizations.id", nullable=False)
    subscription_plan_id: Optional[int] = Field(
        default=None, foreign_key="subscription_plans.id"
    )

    status: Optional[SubscriptionStatus] = Field(default=None)
    start_date: Optional[datetime] = Field(default=None, sa_type=DateTime)
    end_date: Optional[datetime] = Field(default=None, sa_type=DateTime)

    payment_method: Optional[str] = Field(default=None, max_length=100)
    last_payment_date: Optional[datetime] = Field(default=None, sa_type=DateTime)
    next_billing_date: Optional[datetime] = Field(default=None, sa_type=DateTime)

    transactions: list["PaymentTransaction"] = Relationship()

    __table_args__ = (
        Index("idx_subscription_org", "organization_id"),
        Index("idx_subscription_status", "status"),
    )
