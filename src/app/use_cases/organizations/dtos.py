"""
Organization Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.domain.entities import OrganizationSettings, SeatStatus


# ============================================================================
# Command DTOs
# ============================================================================


class CreateOrganizationCommand(BaseModel):
    """Create organization intent; creator_id also gets an active seat"""

    name: str
    subscription_plan_id: Optional[int] = None
    settings: Optional[OrganizationSettings] = None
    creator_id: Optional[int] = None


class CreateSeatCommand(BaseModel):
    organization_id: int
    user_id: int
    status: SeatStatus = SeatStatus.invited
    role_names: List[str] = []


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    subscription_plan_id: Optional[int] = None
    settings: Optional[OrganizationSettings] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class DomainResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    organization_id: int
    domain: str
    verified: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class SeatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    organization_id: int
    user_id: int
    status: SeatStatus
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class SeatDetailResponse(SeatResponse):
    """Seat with the names of its live roles"""

    roles: List[str] = []
