"""
Workflow and Report API Routes
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, require_user_or_admin
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import ParentRef
from src.app.use_cases.workflows import (
    CreateWorkflowCommand,
    CreateWorkflowUseCase,
    ReportResponse,
    UpdateWorkflowUseCase,
    WorkflowResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import Report, Workflow, WorkflowStep

router = APIRouter(prefix="/workflows", tags=["Workflow"])
report_router = APIRouter(prefix="/reports", tags=["Report"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WorkflowResponse)
async def create_workflow(
    request: CreateWorkflowCommand,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Workflow

    The caller is recorded as the creator; steps are stored by order.

    Raises:
        - 400 Bad Request: DUPLICATE_STEP_ORDER
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    use_case = CreateWorkflowUseCase(uow)
    result = await use_case.execute(actor_id(claims), request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateWorkflowRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    steps: Optional[List[WorkflowStep]] = None
    enabled: Optional[bool] = None


@router.put("/{workflow_id}", status_code=status.HTTP_200_OK, response_model=WorkflowResponse)
async def update_workflow(
    workflow_id: int,
    request: UpdateWorkflowRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Workflow

    Replacement steps are checked and ordered as on create.

    Raises:
        - 400 Bad Request: DUPLICATE_STEP_ORDER
        - 404 Not Found: WORKFLOW_NOT_FOUND
    """
    use_case = UpdateWorkflowUseCase(uow)
    result = await use_case.execute(
        actor_id(claims), workflow_id, request.model_dump(exclude_unset=True, exclude_none=True)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


register_crud_routes(
    router,
    repository="workflows",
    entity_type=Workflow,
    response_model=WorkflowResponse,
    not_found_code="WORKFLOW_NOT_FOUND",
    scope_field="organization_id",
    operations=("get", "list", "delete"),
)


class CreateReportRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    query: str = Field(..., min_length=1)
    organization_id: int
    schedule: Optional[str] = Field(None, max_length=100, description="Cron expression")
    recipients: Optional[List[str]] = None


class UpdateReportRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    query: Optional[str] = Field(None, min_length=1)
    schedule: Optional[str] = Field(None, max_length=100)
    recipients: Optional[List[str]] = None
    last_run_at: Optional[datetime] = None


register_crud_routes(
    report_router,
    repository="reports",
    entity_type=Report,
    response_model=ReportResponse,
    not_found_code="REPORT_NOT_FOUND",
    create_model=CreateReportRequest,
    update_model=UpdateReportRequest,
    parents=(ParentRef("organization_id", "organizations", "ORGANIZATION_NOT_FOUND"),),
    creator_field="creator_id",
    scope_field="organization_id",
)
