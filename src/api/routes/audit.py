"""
Audit API Routes

Audit and activity logs are append-only: POST and GET only.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, require_admin, require_user_or_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    ActivityLogPageResponse,
    ActivityLogResponse,
    AuditLogPageResponse,
    AuditLogResponse,
    GetAuditLogUseCase,
    ListActivityLogsUseCase,
    ListAuditLogsUseCase,
    RecordActivityCommand,
    RecordActivityUseCase,
    RecordAuditLogCommand,
    RecordAuditLogUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/audit-logs", tags=["Audit"])
activity_router = APIRouter(prefix="/activity-logs", tags=["Activity"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AuditLogResponse)
async def record_audit_log(
    request: RecordAuditLogCommand,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Append an audit entry attributed to the calling admin"""
    use_case = RecordAuditLogUseCase(uow)
    result = await use_case.execute(actor_id(claims), request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=AuditLogPageResponse)
async def list_audit_logs(
    organization_id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None),
    resource_type: Optional[str] = Query(None),
    resource_id: Optional[int] = Query(None),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of entries to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Audit Logs (admin)

    Entries of soft-deleted subjects are included.

    Returns:
        - audit_logs: newest first
        - next_cursor: cursor for the next page (null if no more)
    """
    use_case = ListAuditLogsUseCase(uow)
    result = await use_case.execute(
        organization_id=organization_id,
        user_id=user_id,
        resource_type=resource_type,
        resource_id=resource_id,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{audit_log_id}", status_code=status.HTTP_200_OK, response_model=AuditLogResponse)
async def get_audit_log(
    audit_log_id: int,
    claims: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetAuditLogUseCase(uow)
    result = await use_case.execute(audit_log_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@activity_router.post("", status_code=status.HTTP_201_CREATED, response_model=ActivityLogResponse)
async def record_activity(
    request: RecordActivityCommand,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Append an activity entry for the caller"""
    use_case = RecordActivityUseCase(uow)
    result = await use_case.execute(actor_id(claims), request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@activity_router.get("", status_code=status.HTTP_200_OK, response_model=ActivityLogPageResponse)
async def list_activity_logs(
    organization_id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None),
    activity_type: Optional[str] = Query(None),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of entries to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List Activity Logs, newest first"""
    use_case = ListActivityLogsUseCase(uow)
    result = await use_case.execute(
        organization_id=organization_id,
        user_id=user_id,
        activity_type=activity_type,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
