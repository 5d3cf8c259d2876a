"""
Workflow and Report Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.domain.entities import WorkflowStep


class CreateWorkflowCommand(BaseModel):
    name: str
    description: Optional[str] = None
    organization_id: int
    steps: List[WorkflowStep] = []
    enabled: bool = True


class WorkflowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    organization_id: int
    creator_id: Optional[int] = None
    steps: Optional[List[WorkflowStep]] = None
    enabled: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    query: str
    organization_id: int
    creator_id: Optional[int] = None
    schedule: Optional[str] = None
    recipients: Optional[List[str]] = None
    last_run_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
