"""
Workflow Entity

Ordered approval steps owned by an organization.
"""

from typing import Optional

from pydantic import BaseModel
from sqlmodel import JSON, Column, Field

from src.domain.base import BaseRecord


class WorkflowStep(BaseModel):
    """One approval step; stored inside Workflow.steps"""

    name: str
    description: Optional[str] = None
    order: int
    approver: Optional[str] = None
    conditions: Optional[str] = None  # free-form condition expression


class Workflow(BaseRecord, table=True):
    __tablename__ = "workflows"

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    steps: Optional[list] = Field(default=None, sa_column=Column(JSON))
    organization_id: int = Field(foreign_key="organizations.id", index=True)
    creator_id: Optional[int] = Field(default=None, foreign_key="users.id")
    enabled: bool = Field(default=True)

    def get_steps(self) -> list[WorkflowStep]:
        steps = [WorkflowStep.model_validate(step) for step in self.steps or []]
        return sorted(steps, key=lambda step: step.order)
