"""
Create Workflow Use Case
"""

from typing import List, Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import Workflow
from src.libs.result import Error, Result, Return
from .dtos import CreateWorkflowCommand, WorkflowResponse


def check_step_orders(orders: List[int]) -> Optional[Error]:
    """DUPLICATE_STEP_ORDER when two steps share an order"""
    if len(orders) != len(set(orders)):
        return Error("DUPLICATE_STEP_ORDER", "Workflow steps must have distinct orders")
    return None


class CreateWorkflowUseCase:
    """
    Create an approval workflow in an organization.

    Business Rules:
    - Steps are stored sorted by their order
    - Two steps may not share an order (DUPLICATE_STEP_ORDER)
    - The caller becomes the workflow's creator

    Errors:
        - ORGANIZATION_NOT_FOUND
        - DUPLICATE_STEP_ORDER
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: CreateWorkflowCommand
    ) -> Result[WorkflowResponse]:
        error = check_step_orders([step.order for step in command.steps])
        if error:
            return Return.err(error)

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            workflow = Workflow(
                name=command.name,
                description=command.description,
                organization_id=command.organization_id,
                creator_id=actor_id,
                enabled=command.enabled,
                steps=[step.model_dump() for step in command.steps],
            )
            workflow.steps = [step.model_dump() for step in workflow.get_steps()]

            try:
                workflow = await self.uow.workflows.create(workflow)
                await record_audit(
                    self.uow, actor_id, "create", workflow, {"created": snapshot(workflow)}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(WorkflowResponse.model_validate(workflow, from_attributes=True))
