from src.app.repositories.base_repository import IAppendOnlyRepository
from src.domain.entities import ActivityLog, AuditLog


class IAuditLogRepository(IAppendOnlyRepository[AuditLog]):
    """AuditLog repository interface - immutable records"""


class IActivityLogRepository(IAppendOnlyRepository[ActivityLog]):
    """ActivityLog repository interface - immutable records"""
