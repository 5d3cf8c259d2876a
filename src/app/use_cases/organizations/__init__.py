"""
Organization Use Cases

Organizations, their seats and their domains.
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .dtos import (
    CreateOrganizationCommand,
    CreateSeatCommand,
    DomainResponse,
    OrganizationResponse,
    SeatDetailResponse,
    SeatResponse,
)
from .seat_use_cases import (
    AssignSeatRoleUseCase,
    ChangeSeatStatusUseCase,
    CreateSeatUseCase,
    GetSeatUseCase,
)

__all__ = [
    # Use Cases
    "CreateOrganizationUseCase",
    "CreateSeatUseCase",
    "ChangeSeatStatusUseCase",
    "AssignSeatRoleUseCase",
    "GetSeatUseCase",
    # DTOs
    "CreateOrganizationCommand",
    "CreateSeatCommand",
    "OrganizationResponse",
    "DomainResponse",
    "SeatResponse",
    "SeatDetailResponse",
]
