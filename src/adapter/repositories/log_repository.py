from src.adapter.repositories.base_repository import SqlModelAppendOnlyRepository
from src.app.repositories.log_repository import IActivityLogRepository, IAuditLogRepository
from src.domain.entities import ActivityLog, AuditLog


class AuditLogRepository(SqlModelAppendOnlyRepository[AuditLog], IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    model = AuditLog


class ActivityLogRepository(
    SqlModelAppendOnlyRepository[ActivityLog], IActivityLogRepository
):
    """ActivityLog repository implementation using SQLModel"""

    model = ActivityLog
