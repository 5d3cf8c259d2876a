import pytest

from src.app.use_cases.organizations import (
    ChangeSeatStatusUseCase,
    CreateSeatCommand,
    CreateSeatUseCase,
)
from src.domain.entities import Organization, Seat, SeatStatus, User


def make_seat(status):
    return Seat(id=10, organization_id=1, user_id=2, status=status)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "current,target",
    [
        (SeatStatus.invited, SeatStatus.active),
        (SeatStatus.invited, SeatStatus.inactive),
        (SeatStatus.active, SeatStatus.inactive),
        (SeatStatus.inactive, SeatStatus.active),
    ],
)
async def test_allowed_seat_transitions(mock_uow, current, target):
    mock_uow.seats.get_by_id.return_value = make_seat(current)
    mock_uow.seats.get_roles.return_value = []

    result = await ChangeSeatStatusUseCase(mock_uow).execute(1, 10, target)

    assert result.is_ok()
    assert result.value.status == target
    audit_log = mock_uow.audit_logs.create.call_args.args[0]
    assert audit_log.changes == {"status": {"old": current.value, "new": target.value}}
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "current,target",
    [
        (SeatStatus.active, SeatStatus.invited),
        (SeatStatus.inactive, SeatStatus.invited),
        (SeatStatus.active, SeatStatus.active),
    ],
)
async def test_rejected_seat_transitions(mock_uow, current, target):
    mock_uow.seats.get_by_id.return_value = make_seat(current)

    result = await ChangeSeatStatusUseCase(mock_uow).execute(1, 10, target)

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS_TRANSITION"
    mock_uow.seats.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_change_status_of_missing_seat(mock_uow):
    mock_uow.seats.get_by_id.return_value = None

    result = await ChangeSeatStatusUseCase(mock_uow).execute(1, 10, SeatStatus.active)

    assert result.error.code == "SEAT_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_seat_defaults_to_invited_and_links_member(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")
    mock_uow.users.get_by_id.return_value = User(id=2, email="user@acme.com")
    mock_uow.seats.get_by_user_and_organization.return_value = None
    mock_uow.organizations.get_member_ids.return_value = []
    mock_uow.seats.get_roles.return_value = []

    result = await CreateSeatUseCase(mock_uow).execute(
        1, CreateSeatCommand(organization_id=1, user_id=2)
    )

    assert result.is_ok()
    assert result.value.status == SeatStatus.invited
    mock_uow.users.add_organization.assert_awaited_once_with(2, 1)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_seat_requires_live_organization(mock_uow):
    mock_uow.organizations.get_by_id.return_value = None

    result = await CreateSeatUseCase(mock_uow).execute(
        1, CreateSeatCommand(organization_id=1, user_id=2)
    )

    assert result.error.code == "ORGANIZATION_NOT_FOUND"
    mock_uow.seats.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_seat_requires_live_user(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")
    mock_uow.users.get_by_id.return_value = None

    result = await CreateSeatUseCase(mock_uow).execute(
        1, CreateSeatCommand(organization_id=1, user_id=2)
    )

    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.seats.create.assert_not_awaited()
