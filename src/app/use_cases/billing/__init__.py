"""
Billing Use Cases

Subscriptions, plans and payment transactions.
"""

from .dtos import (
    CreateSubscriptionCommand,
    FeatureResponse,
    PaymentTransactionPageResponse,
    PaymentTransactionResponse,
    RecordPaymentCommand,
    SubscriptionPlanDetailResponse,
    SubscriptionPlanResponse,
    SubscriptionResponse,
)
from .payment_use_cases import ListPaymentsUseCase, RecordPaymentUseCase
from .plan_use_cases import AddPlanFeatureUseCase, GetSubscriptionPlanUseCase
from .subscription_use_cases import CreateSubscriptionUseCase

__all__ = [
    # Use Cases
    "CreateSubscriptionUseCase",
    "GetSubscriptionPlanUseCase",
    "AddPlanFeatureUseCase",
    "RecordPaymentUseCase",
    "ListPaymentsUseCase",
    # DTOs
    "CreateSubscriptionCommand",
    "RecordPaymentCommand",
    "SubscriptionResponse",
    "SubscriptionPlanResponse",
    "SubscriptionPlanDetailResponse",
    "FeatureResponse",
    "PaymentTransactionResponse",
    "PaymentTransactionPageResponse",
]
