"""
Create Organization Use Case

Creates an organization and, when a creator is given, the creator's
membership and active seat in the same commit.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import Organization, Seat, SeatStatus
from src.libs.result import Error, Result, Return
from .dtos import CreateOrganizationCommand, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Create an organization.

    Business Logic:
    1. Check the referenced plan and creator exist
    2. Persist the organization with validated settings
    3. If a creator is given: link creator <-> organization and add an
       active seat for the creator
    4. Audit and commit once; a failure at any step leaves nothing behind

    Errors:
        - SUBSCRIPTION_PLAN_NOT_FOUND
        - USER_NOT_FOUND: creator missing
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: CreateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            if command.subscription_plan_id is not None:
                plan = await self.uow.subscription_plans.get_by_id(command.subscription_plan_id)
                if plan is None:
                    return Return.err(
                        Error("SUBSCRIPTION_PLAN_NOT_FOUND", "Subscription plan not found")
                    )

            if command.creator_id is not None:
                creator = await self.uow.users.get_by_id(command.creator_id)
                if creator is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

            organization = Organization(
                name=command.name,
                subscription_plan_id=command.subscription_plan_id,
                settings=command.settings.model_dump() if command.settings else None,
            )

            try:
                organization = await self.uow.organizations.create(organization)
                await record_audit(
                    self.uow,
                    actor_id,
                    "create",
                    organization,
                    {"created": snapshot(organization)},
                )

                if command.creator_id is not None:
                    await self.uow.users.add_organization(command.creator_id, organization.id)
                    seat = await self.uow.seats.create(
                        Seat(
                            organization_id=organization.id,
                            user_id=command.creator_id,
                            status=SeatStatus.active,
                        )
                    )
                    await record_audit(
                        self.uow, actor_id, "create", seat, {"created": snapshot(seat)}
                    )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            logger.info(f"Organization {organization.id} created")
            return Return.ok(
                OrganizationResponse.model_validate(organization, from_attributes=True)
            )
