"""
Seat Use Cases

Seats bind a user to an organization. Status follows
invited -> active -> inactive, with inactive seats reactivatable.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import SEAT_TRANSITIONS, Seat, SeatStatus
from src.libs.result import Error, Result, Return
from .dtos import CreateSeatCommand, SeatDetailResponse

logger = logging.getLogger(__name__)


async def to_seat_response(uow: UnitOfWork, seat: Seat) -> SeatDetailResponse:
    roles = await uow.seats.get_roles(seat.id)
    return SeatDetailResponse(
        id=seat.id,
        organization_id=seat.organization_id,
        user_id=seat.user_id,
        status=seat.status,
        roles=[role.name for role in roles],
        created_at=seat.created_at,
        updated_at=seat.updated_at,
        deleted_at=seat.deleted_at,
    )


class CreateSeatUseCase:
    """
    Create a seat for a user in an organization.

    Business Rules:
    - Both the organization and the user must be live rows
    - One live seat per user per organization
    - The user is associated with the organization if not already

    Errors:
        - ORGANIZATION_NOT_FOUND
        - USER_NOT_FOUND
        - ROLE_NOT_FOUND
        - SEAT_ALREADY_EXISTS
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: CreateSeatCommand
    ) -> Result[SeatDetailResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing_seat = await self.uow.seats.get_by_user_and_organization(
                command.user_id, command.organization_id
            )
            if existing_seat:
                return Return.err(
                    Error("SEAT_ALREADY_EXISTS", "User already holds a seat in this organization")
                )

            roles = []
            for role_name in command.role_names:
                role = await self.uow.roles.get_by_name(role_name)
                if role is None:
                    return Return.err(Error("ROLE_NOT_FOUND", f"Role not found: {role_name}"))
                roles.append(role)

            try:
                seat = await self.uow.seats.create(
                    Seat(
                        organization_id=command.organization_id,
                        user_id=command.user_id,
                        status=command.status,
                    )
                )
                for role in roles:
                    await self.uow.seats.add_role(seat.id, role.id)

                member_ids = await self.uow.organizations.get_member_ids(command.organization_id)
                if command.user_id not in member_ids:
                    await self.uow.users.add_organization(command.user_id, command.organization_id)

                await record_audit(
                    self.uow,
                    actor_id,
                    "create",
                    seat,
                    {"created": snapshot(seat), "roles": command.role_names},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(await to_seat_response(self.uow, seat))


class ChangeSeatStatusUseCase:
    """
    Move a seat along its lifecycle.

    Errors:
        - SEAT_NOT_FOUND
        - INVALID_STATUS_TRANSITION: move not allowed from the current status
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], seat_id: int, status: SeatStatus
    ) -> Result[SeatDetailResponse]:
        async with self.uow:
            seat = await self.uow.seats.get_by_id(seat_id)
            if seat is None:
                return Return.err(Error("SEAT_NOT_FOUND", "Seat not found"))

            if status not in SEAT_TRANSITIONS[seat.status]:
                return Return.err(
                    Error(
                        "INVALID_STATUS_TRANSITION",
                        f"Cannot change seat status from {seat.status.value} to {status.value}",
                    )
                )

            old_status = seat.status
            seat.status = status
            seat = await self.uow.seats.update(seat)
            await record_audit(
                self.uow,
                actor_id,
                "change_status",
                seat,
                {"status": {"old": old_status.value, "new": status.value}},
            )
            await self.uow.commit()

            logger.info(f"Seat {seat_id} moved from {old_status.value} to {status.value}")
            return Return.ok(await to_seat_response(self.uow, seat))


class AssignSeatRoleUseCase:
    """
    Attach a role to a seat.

    Errors:
        - SEAT_NOT_FOUND
        - ROLE_NOT_FOUND
        - CONSTRAINT_VIOLATION: role already attached
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], seat_id: int, role_name: str
    ) -> Result[SeatDetailResponse]:
        async with self.uow:
            seat = await self.uow.seats.get_by_id(seat_id)
            if seat is None:
                return Return.err(Error("SEAT_NOT_FOUND", "Seat not found"))

            role = await self.uow.roles.get_by_name(role_name)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", f"Role not found: {role_name}"))

            try:
                await self.uow.seats.add_role(seat.id, role.id)
                await record_audit(self.uow, actor_id, "assign_role", seat, {"role": role.name})
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(await to_seat_response(self.uow, seat))


class GetSeatUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, seat_id: int, include_deleted: bool = False
    ) -> Result[SeatDetailResponse]:
        async with self.uow:
            seat = await self.uow.seats.get_by_id(seat_id, include_deleted=include_deleted)
            if seat is None:
                return Return.err(Error("SEAT_NOT_FOUND", "Seat not found"))
            return Return.ok(await to_seat_response(self.uow, seat))
