from datetime import datetime

import pytest

from src.app.use_cases.billing import (
    CreateSubscriptionCommand,
    CreateSubscriptionUseCase,
    RecordPaymentCommand,
    RecordPaymentUseCase,
)
from src.domain.entities import Organization, Subscription, SubscriptionStatus


@pytest.mark.asyncio
async def test_subscription_defaults_to_trialing(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")

    result = await CreateSubscriptionUseCase(mock_uow).execute(
        1, CreateSubscriptionCommand(organization_id=1)
    )

    assert result.is_ok()
    assert result.value.status == SubscriptionStatus.trialing
    assert result.value.start_date is not None
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_subscription_keeps_explicit_status_and_start(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")
    start = datetime(2026, 1, 1)

    result = await CreateSubscriptionUseCase(mock_uow).execute(
        1,
        CreateSubscriptionCommand(
            organization_id=1, status=SubscriptionStatus.active, start_date=start
        ),
    )

    assert result.value.status == SubscriptionStatus.active
    assert result.value.start_date == start


@pytest.mark.asyncio
async def test_subscription_requires_live_organization(mock_uow):
    mock_uow.organizations.get_by_id.return_value = None

    result = await CreateSubscriptionUseCase(mock_uow).execute(
        1, CreateSubscriptionCommand(organization_id=1)
    )

    assert result.error.code == "ORGANIZATION_NOT_FOUND"
    mock_uow.subscriptions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_recording_payment_leaves_status_alone(mock_uow):
    subscription = Subscription(
        id=3,
        organization_id=1,
        status=SubscriptionStatus.trialing,
        start_date=datetime(2026, 1, 1),
    )
    mock_uow.subscriptions.get_by_id.return_value = subscription

    result = await RecordPaymentUseCase(mock_uow).execute(
        1, 3, RecordPaymentCommand(amount=49.0, status="succeeded", gateway="stripe")
    )

    assert result.is_ok()
    assert result.value.subscription_id == 3
    assert result.value.currency == "USD"
    assert subscription.status == SubscriptionStatus.trialing
    mock_uow.subscriptions.update.assert_not_awaited()
    mock_uow.payment_transactions.create.assert_awaited_once()


@pytest.mark.asyncio
async def test_payment_for_missing_subscription(mock_uow):
    mock_uow.subscriptions.get_by_id.return_value = None

    result = await RecordPaymentUseCase(mock_uow).execute(
        1, 3, RecordPaymentCommand(amount=49.0, status="succeeded")
    )

    assert result.error.code == "SUBSCRIPTION_NOT_FOUND"
    mock_uow.payment_transactions.create.assert_not_awaited()
