"""
Audit Use Cases

Audit trail and user activity logs. Both are append-only.
"""

from .activity_log_use_cases import ListActivityLogsUseCase, RecordActivityUseCase
from .audit_log_use_cases import (
    GetAuditLogUseCase,
    ListAuditLogsUseCase,
    RecordAuditLogUseCase,
)
from .dtos import (
    ActivityLogPageResponse,
    ActivityLogResponse,
    AuditLogPageResponse,
    AuditLogResponse,
    RecordActivityCommand,
    RecordAuditLogCommand,
)

__all__ = [
    # Use Cases
    "RecordAuditLogUseCase",
    "ListAuditLogsUseCase",
    "GetAuditLogUseCase",
    "RecordActivityUseCase",
    "ListActivityLogsUseCase",
    # DTOs
    "RecordAuditLogCommand",
    "RecordActivityCommand",
    "AuditLogResponse",
    "ActivityLogResponse",
    "AuditLogPageResponse",
    "ActivityLogPageResponse",
]
