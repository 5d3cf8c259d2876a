"""
Audit Trail Helpers

Builds AuditLog entries for state-changing use cases. The entry is appended
inside the caller's unit of work so it commits with the change it records.
"""

from typing import Any, Dict, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import BaseRecord
from src.domain.entities import AuditLog, FieldChange, Organization

# Never copied into audit changes
SENSITIVE_FIELDS = {"password_hash", "verification_code", "key"}


def snapshot(entity: BaseRecord) -> Dict[str, Any]:
    """JSON-safe copy of an entity's columns, without secrets"""
    return entity.model_dump(mode="json", exclude=SENSITIVE_FIELDS)


def diff_fields(entity: BaseRecord, changes: Dict[str, Any]) -> Dict[str, Any]:
    """Field -> {old, new} for every change that alters the current value"""
    diff = {}
    for field, new_value in changes.items():
        old_value = getattr(entity, field)
        if old_value == new_value:
            continue
        if field in SENSITIVE_FIELDS:
            diff[field] = FieldChange(old="***", new="***").model_dump()
        else:
            diff[field] = FieldChange(old=old_value, new=new_value).model_dump(mode="json")
    return diff


def organization_of(entity: BaseRecord) -> Optional[int]:
    if isinstance(entity, Organization):
        return entity.id
    return getattr(entity, "organization_id", None)


async def record_audit(
    uow: UnitOfWork,
    actor_id: Optional[int],
    action: str,
    entity: BaseRecord,
    changes: Optional[Dict[str, Any]] = None,
) -> AuditLog:
    """Append an audit entry describing `action` on `entity`"""
    audit_log = AuditLog(
        user_id=actor_id,
        organization_id=organization_of(entity),
        action=action,
        resource_type=entity.__tablename__,
        resource_id=entity.id,
        changes=changes,
    )
    return await uow.audit_logs.create(audit_log)
