from src.adapter.repositories.base_repository import SqlModelRepository
from src.app.repositories.workflow_repository import IReportRepository, IWorkflowRepository
from src.domain.entities import Report, Workflow


class WorkflowRepository(SqlModelRepository[Workflow], IWorkflowRepository):
    """Workflow repository implementation using SQLModel"""

    model = Workflow


class ReportRepository(SqlModelRepository[Report], IReportRepository):
    """Report repository implementation using SQLModel"""

    model = Report
