import pytest

from src.app.use_cases.workflows import UpdateWorkflowUseCase
from src.domain.entities import Workflow


def stored_workflow():
    return Workflow(
        id=3,
        name="Expense approval",
        organization_id=1,
        steps=[{"name": "manager", "order": 1}],
    )


@pytest.mark.asyncio
async def test_replacement_steps_are_stored_in_order(mock_uow):
    mock_uow.workflows.get_by_id.return_value = stored_workflow()

    result = await UpdateWorkflowUseCase(mock_uow).execute(
        5,
        3,
        {"steps": [{"name": "finance", "order": 2}, {"name": "manager", "order": 1}]},
    )

    assert result.is_ok()
    assert [step.name for step in result.value.steps] == ["manager", "finance"]
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_replacement_steps_with_duplicate_order_are_rejected(mock_uow):
    workflow = stored_workflow()
    mock_uow.workflows.get_by_id.return_value = workflow

    result = await UpdateWorkflowUseCase(mock_uow).execute(
        5,
        3,
        {
            "steps": [
                {"name": "finance", "order": 2},
                {"name": "legal", "order": 2},
                {"name": "manager", "order": 1},
            ]
        },
    )

    assert result.error.code == "DUPLICATE_STEP_ORDER"
    assert workflow.steps == [{"name": "manager", "order": 1}]
    mock_uow.workflows.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_without_steps_keeps_them(mock_uow):
    mock_uow.workflows.get_by_id.return_value = stored_workflow()

    result = await UpdateWorkflowUseCase(mock_uow).execute(5, 3, {"enabled": False})

    assert result.value.enabled is False
    assert [step.order for step in result.value.steps] == [1]
