"""
Shared use case building blocks: generic CRUD and the audit trail.
"""

from .audit_trail import SENSITIVE_FIELDS, diff_fields, record_audit, snapshot
from .crud import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    GetEntityUseCase,
    ListEntitiesUseCase,
    ParentRef,
    UpdateEntityUseCase,
    check_parents,
    constraint_error,
    not_found_error,
    unauthorized_error,
)

__all__ = [
    "SENSITIVE_FIELDS",
    "diff_fields",
    "record_audit",
    "snapshot",
    "CreateEntityUseCase",
    "DeleteEntityUseCase",
    "GetEntityUseCase",
    "ListEntitiesUseCase",
    "ParentRef",
    "UpdateEntityUseCase",
    "check_parents",
    "constraint_error",
    "not_found_error",
    "unauthorized_error",
]
