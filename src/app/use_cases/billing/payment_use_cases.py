"""
Payment Transaction Use Cases

Transactions are immutable records appended against a subscription.
Recording a payment does not change the subscription's status.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import PaymentTransaction
from src.libs.result import Error, Result, Return
from .dtos import (
    PaymentTransactionPageResponse,
    PaymentTransactionResponse,
    RecordPaymentCommand,
)

logger = logging.getLogger(__name__)


class RecordPaymentUseCase:
    """
    Append a payment transaction.

    Errors:
        - SUBSCRIPTION_NOT_FOUND
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], subscription_id: int, command: RecordPaymentCommand
    ) -> Result[PaymentTransactionResponse]:
        async with self.uow:
            subscription = await self.uow.subscriptions.get_by_id(subscription_id)
            if subscription is None:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            values = command.model_dump(exclude_none=True)
            transaction = PaymentTransaction(subscription_id=subscription.id, **values)

            try:
                transaction = await self.uow.payment_transactions.create(transaction)
                await record_audit(
                    self.uow,
                    actor_id,
                    "record_payment",
                    subscription,
                    {"transaction": snapshot(transaction)},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            logger.info(
                f"Payment {transaction.id} recorded for subscription {subscription.id}: "
                f"{transaction.status}"
            )
            return Return.ok(
                PaymentTransactionResponse.model_validate(transaction, from_attributes=True)
            )


class ListPaymentsUseCase:
    """List a subscription's transactions, newest first, cursor paginated"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, subscription_id: int, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[PaymentTransactionPageResponse]:
        async with self.uow:
            subscription = await self.uow.subscriptions.get_by_id(
                subscription_id, include_deleted=True
            )
            if subscription is None:
                return Return.err(Error("SUBSCRIPTION_NOT_FOUND", "Subscription not found"))

            transactions, next_cursor = await self.uow.payment_transactions.list_paginated(
                limit=limit, cursor=cursor, subscription_id=subscription_id
            )
            return Return.ok(
                PaymentTransactionPageResponse(
                    transactions=[
                        PaymentTransactionResponse.model_validate(t, from_attributes=True)
                        for t in transactions
                    ],
                    next_cursor=next_cursor,
                )
            )
