"""
Billing Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.domain.entities import SubscriptionStatus


class CreateSubscriptionCommand(BaseModel):
    """status and start_date fall back to trialing / now when omitted"""

    organization_id: int
    subscription_plan_id: Optional[int] = None
    status: Optional[SubscriptionStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    payment_method: Optional[str] = None
    next_billing_date: Optional[datetime] = None


class RecordPaymentCommand(BaseModel):
    amount: float
    currency: str = "USD"
    status: str
    gateway: Optional[str] = None
    gateway_id: Optional[str] = None
    timestamp: Optional[datetime] = None


class SubscriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    organization_id: int
    subscription_plan_id: Optional[int] = None
    status: SubscriptionStatus
    start_date: datetime
    end_date: Optional[datetime] = None
    payment_method: Optional[str] = None
    last_payment_date: Optional[datetime] = None
    next_billing_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class FeatureResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class SubscriptionPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    currency: str
    interval: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class SubscriptionPlanDetailResponse(SubscriptionPlanResponse):
    """Plan with its live features"""

    features: List[FeatureResponse] = []


class PaymentTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    subscription_id: int
    amount: float
    currency: str
    status: str
    gateway: Optional[str] = None
    gateway_id: Optional[str] = None
    timestamp: datetime
    created_at: datetime


class PaymentTransactionPageResponse(BaseModel):
    """One page of payment transactions, newest first"""

    transactions: List[PaymentTransactionResponse]
    next_cursor: Optional[str] = None
