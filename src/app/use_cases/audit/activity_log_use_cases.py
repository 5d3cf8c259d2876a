"""
Activity Log Use Cases
"""

from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityLog
from src.libs.result import Error, Result, Return
from .dtos import ActivityLogPageResponse, ActivityLogResponse, RecordActivityCommand


class RecordActivityUseCase:
    """
    Append an activity entry for the calling user.

    Errors:
        - ORGANIZATION_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[int], command: RecordActivityCommand
    ) -> Result[ActivityLogResponse]:
        async with self.uow:
            if command.organization_id is not None:
                organization = await self.uow.organizations.get_by_id(command.organization_id)
                if organization is None:
                    return Return.err(
                        Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                    )

            activity_log = await self.uow.activity_logs.create(
                ActivityLog(user_id=user_id, **command.model_dump())
            )
            await self.uow.commit()

            return Return.ok(
                ActivityLogResponse.model_validate(activity_log, from_attributes=True)
            )


class ListActivityLogsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        organization_id: Optional[int] = None,
        user_id: Optional[int] = None,
        activity_type: Optional[str] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[ActivityLogPageResponse]:
        async with self.uow:
            activity_logs, next_cursor = await self.uow.activity_logs.list_paginated(
                limit=limit,
                cursor=cursor,
                organization_id=organization_id,
                user_id=user_id,
                activity_type=activity_type,
            )
            return Return.ok(
                ActivityLogPageResponse(
                    activity_logs=[
                        ActivityLogResponse.model_validate(log, from_attributes=True)
                        for log in activity_logs
                    ],
                    next_cursor=next_cursor,
                )
            )
