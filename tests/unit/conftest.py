import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.base import utcnow

REPOSITORIES = (
    "users",
    "roles",
    "permissions",
    "organizations",
    "domains",
    "seats",
    "subscriptions",
    "subscription_plans",
    "features",
    "payment_transactions",
    "notification_preferences",
    "api_keys",
    "workflows",
    "reports",
    "audit_logs",
    "activity_logs",
)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork whose repository methods are all AsyncMocks"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Writes hand back the entity they were given, as the real repositories do
    for name in REPOSITORIES:
        repository = AsyncMock()
        repository.create.side_effect = _persist
        repository.update.side_effect = _touch
        repository.soft_delete.side_effect = _soft_delete
        setattr(uow, name, repository)

    return uow


_next_id = {"value": 1000}


async def _persist(entity):
    if entity.id is None:
        _next_id["value"] += 1
        entity.id = _next_id["value"]
    return entity


async def _touch(entity):
    return entity


async def _soft_delete(entity):
    entity.deleted_at = utcnow()
    return entity
