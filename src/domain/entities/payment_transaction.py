"""
PaymentTransaction Entity

Immutable record of a billing event.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field

from src.domain.base import BaseRecord, utcnow


class PaymentTransaction(BaseRecord, table=True):
    """
    PaymentTransaction entity - one billing event of a subscription.

    Business Rules:
    - Immutable (never updated or deleted)
    - gateway/gateway_id identify the record at the payment provider
    """

    __tablename__ = "payment_transactions"

    subscription_id: int = Field(foreign_key="subscriptions.id", index=True)
    amount: float
    currency: str = Field(default="USD", max_length=3)
    status: str = Field(max_length=50)  # e.g., "succeeded", "failed", "refunded"
    gateway: Optional[str] = Field(default=None, max_length=50)
    gateway_id: Optional[str] = Field(default=None, max_length=255)
    timestamp: datetime = Field(default_factory=utcnow, sa_type=DateTime)
