"""
Workflow Use Cases

Approval workflows and stored report definitions. Reports use the generic
CRUD use cases; workflows need step ordering on create and update.
"""

from .create_workflow_use_case import CreateWorkflowUseCase
from .update_workflow_use_case import UpdateWorkflowUseCase
from .dtos import CreateWorkflowCommand, ReportResponse, WorkflowResponse

__all__ = [
    "CreateWorkflowUseCase",
    "UpdateWorkflowUseCase",
    "CreateWorkflowCommand",
    "WorkflowResponse",
    "ReportResponse",
]
