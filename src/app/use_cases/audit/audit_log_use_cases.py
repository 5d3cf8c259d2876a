"""
Audit Log Use Cases

Append and page through the immutable audit trail.
"""

from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditLog
from src.libs.result import Error, Result, Return
from .dtos import AuditLogPageResponse, AuditLogResponse, RecordAuditLogCommand


class RecordAuditLogUseCase:
    """
    Append an audit entry on behalf of the caller.

    Errors:
        - ORGANIZATION_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: RecordAuditLogCommand
    ) -> Result[AuditLogResponse]:
        async with self.uow:
            if command.organization_id is not None:
                organization = await self.uow.organizations.get_by_id(
                    command.organization_id, include_deleted=True
                )
                if organization is None:
                    return Return.err(
                        Error("ORGANIZATION_NOT_FOUND", "Organization not found")
                    )

            audit_log = await self.uow.audit_logs.create(
                AuditLog(user_id=actor_id, **command.model_dump())
            )
            await self.uow.commit()

            return Return.ok(AuditLogResponse.model_validate(audit_log, from_attributes=True))


class ListAuditLogsUseCase:
    """
    Page through audit entries, newest first.

    Filters are exact matches; None means unfiltered.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        organization_id: Optional[int] = None,
        user_id: Optional[int] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[int] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[AuditLogPageResponse]:
        async with self.uow:
            audit_logs, next_cursor = await self.uow.audit_logs.list_paginated(
                limit=limit,
                cursor=cursor,
                organization_id=organization_id,
                user_id=user_id,
                resource_type=resource_type,
                resource_id=resource_id,
            )
            return Return.ok(
                AuditLogPageResponse(
                    audit_logs=[
                        AuditLogResponse.model_validate(log, from_attributes=True)
                        for log in audit_logs
                    ],
                    next_cursor=next_cursor,
                )
            )


class GetAuditLogUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, audit_log_id: int) -> Result[AuditLogResponse]:
        async with self.uow:
            audit_log = await self.uow.audit_logs.get_by_id(audit_log_id)
            if audit_log is None:
                return Return.err(Error("AUDIT_LOG_NOT_FOUND", "Audit log not found"))
            return Return.ok(AuditLogResponse.model_validate(audit_log, from_attributes=True))
