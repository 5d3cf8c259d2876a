"""
Seat API Routes

Seats bind users to organizations. PUT moves a seat along its status
lifecycle; other fields of a seat never change.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, ensure_include_deleted_allowed, require_user_or_admin
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organizations import (
    AssignSeatRoleUseCase,
    ChangeSeatStatusUseCase,
    CreateSeatCommand,
    CreateSeatUseCase,
    GetSeatUseCase,
    SeatDetailResponse,
    SeatResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import Seat, SeatStatus

router = APIRouter(prefix="/seats", tags=["Seat"])


class CreateSeatRequest(BaseModel):
    organization_id: int
    user_id: int
    status: SeatStatus = SeatStatus.invited
    role_names: List[str] = Field(default_factory=list)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SeatDetailResponse)
async def create_seat(
    request: CreateSeatRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Seat

    Raises:
        - 404 Not Found: ORGANIZATION_NOT_FOUND, USER_NOT_FOUND, ROLE_NOT_FOUND
        - 409 Conflict: SEAT_ALREADY_EXISTS, CONSTRAINT_VIOLATION
    """
    use_case = CreateSeatUseCase(uow)
    result = await use_case.execute(actor_id(claims), CreateSeatCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{seat_id}", status_code=status.HTTP_200_OK, response_model=SeatDetailResponse)
async def get_seat(
    seat_id: int,
    include_deleted: bool = Query(False),
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    ensure_include_deleted_allowed(claims, include_deleted)

    use_case = GetSeatUseCase(uow)
    result = await use_case.execute(seat_id, include_deleted=include_deleted)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangeSeatStatusRequest(BaseModel):
    status: SeatStatus


@router.put("/{seat_id}", status_code=status.HTTP_200_OK, response_model=SeatDetailResponse)
async def change_seat_status(
    seat_id: int,
    request: ChangeSeatStatusRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Seat Status

    Allowed moves: invited -> active | inactive, active -> inactive,
    inactive -> active.

    Raises:
        - 404 Not Found: SEAT_NOT_FOUND
        - 409 Conflict: INVALID_STATUS_TRANSITION
    """
    use_case = ChangeSeatStatusUseCase(uow)
    result = await use_case.execute(actor_id(claims), seat_id, request.status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class SeatRoleRequest(BaseModel):
    role_name: str = Field(..., min_length=1)


@router.post(
    "/{seat_id}/roles", status_code=status.HTTP_200_OK, response_model=SeatDetailResponse
)
async def assign_seat_role(
    seat_id: int,
    request: SeatRoleRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AssignSeatRoleUseCase(uow)
    result = await use_case.execute(actor_id(claims), seat_id, request.role_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


register_crud_routes(
    router,
    repository="seats",
    entity_type=Seat,
    response_model=SeatResponse,
    not_found_code="SEAT_NOT_FOUND",
    scope_field="organization_id",
    operations=("list", "delete"),
)
