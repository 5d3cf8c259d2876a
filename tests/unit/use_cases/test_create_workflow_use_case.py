import pytest

from src.app.use_cases.workflows import CreateWorkflowCommand, CreateWorkflowUseCase
from src.domain.entities import Organization, WorkflowStep


@pytest.mark.asyncio
async def test_steps_are_stored_in_order(mock_uow):
    mock_uow.organizations.get_by_id.return_value = Organization(id=1, name="Acme Corp")
    command = CreateWorkflowCommand(
        name="Expense approval",
        organization_id=1,
        steps=[
            WorkflowStep(name="finance", order=2),
            WorkflowStep(name="manager", order=1),
        ],
    )

    result = await CreateWorkflowUseCase(mock_uow).execute(5, command)

    assert result.is_ok()
    assert [step.name for step in result.value.steps] == ["manager", "finance"]
    assert result.value.creator_id == 5


@pytest.mark.asyncio
async def test_duplicate_step_order_is_rejected(mock_uow):
    command = CreateWorkflowCommand(
        name="Expense approval",
        organization_id=1,
        steps=[
            WorkflowStep(name="manager", order=1),
            WorkflowStep(name="finance", order=1),
        ],
    )

    result = await CreateWorkflowUseCase(mock_uow).execute(5, command)

    assert result.error.code == "DUPLICATE_STEP_ORDER"
    mock_uow.workflows.create.assert_not_awaited()
