"""
Audit Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class RecordAuditLogCommand(BaseModel):
    organization_id: Optional[int] = None
    action: str
    resource_type: str
    resource_id: Optional[int] = None
    changes: Optional[Dict[str, Any]] = None


class RecordActivityCommand(BaseModel):
    organization_id: Optional[int] = None
    activity_type: str
    activity_metadata: Optional[Dict[str, Any]] = None


class AuditLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    organization_id: Optional[int] = None
    action: str
    resource_type: str
    resource_id: Optional[int] = None
    timestamp: datetime
    changes: Optional[Dict[str, Any]] = None


class ActivityLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    organization_id: Optional[int] = None
    activity_type: str
    timestamp: datetime
    activity_metadata: Optional[Dict[str, Any]] = None


class AuditLogPageResponse(BaseModel):
    """One page of audit entries, newest first"""

    audit_logs: List[AuditLogResponse]
    next_cursor: Optional[str] = None


class ActivityLogPageResponse(BaseModel):
    """One page of activity entries, newest first"""

    activity_logs: List[ActivityLogResponse]
    next_cursor: Optional[str] = None
