"""
Update Workflow Use Case
"""

from typing import Any, Dict, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import UpdateEntityUseCase
from src.libs.result import Result, Return
from .create_workflow_use_case import check_step_orders
from .dtos import WorkflowResponse


class UpdateWorkflowUseCase(UpdateEntityUseCase[WorkflowResponse]):
    """
    Update a workflow. Replacement steps follow the same rules as on create:
    distinct orders, stored sorted by order.

    Errors:
        - WORKFLOW_NOT_FOUND
        - DUPLICATE_STEP_ORDER
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        super().__init__(uow, "workflows", WorkflowResponse, "WORKFLOW_NOT_FOUND")

    async def execute(
        self,
        actor_id: Optional[int],
        entity_id: int,
        changes: Dict[str, Any],
        owner_id: Optional[int] = None,
    ) -> Result[WorkflowResponse]:
        steps = changes.get("steps")
        if steps is not None:
            error = check_step_orders([step["order"] for step in steps])
            if error:
                return Return.err(error)
            changes = {**changes, "steps": sorted(steps, key=lambda step: step["order"])}

        return await super().execute(actor_id, entity_id, changes, owner_id)
