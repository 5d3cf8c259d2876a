from src.app.repositories.base_repository import ICrudRepository
from src.domain.entities import Report, Workflow


class IWorkflowRepository(ICrudRepository[Workflow]):
    """Workflow repository interface - application layer"""


class IReportRepository(ICrudRepository[Report]):
    """Report repository interface - application layer"""
