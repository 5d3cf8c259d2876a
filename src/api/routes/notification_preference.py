"""
Notification Preference API Routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import actor_id, ensure_admin_or_self, require_user_or_admin
from src.api.utils.crud_router import register_crud_routes
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CreateNotificationPreferenceUseCase,
    NotificationPreferenceResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import NotificationPreference

router = APIRouter(prefix="/notification-preferences", tags=["Notification Preference"])


class CreateNotificationPreferenceRequest(BaseModel):
    user_id: Optional[int] = Field(None, description="Owner; defaults to the caller")
    email_enabled: bool = True
    sms_enabled: bool = False
    in_app_enabled: bool = True
    billing_emails: bool = True
    product_emails: bool = True
    marketing_emails: bool = False


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NotificationPreferenceResponse,
)
async def create_notification_preference(
    request: CreateNotificationPreferenceRequest,
    claims: dict = Depends(require_user_or_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Notification Preferences

    Raises:
        - 401 Unauthorized: creating for another user without admin role
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: NOTIFICATION_PREFERENCE_ALREADY_EXISTS
    """
    owner_id = request.user_id if request.user_id is not None else actor_id(claims)
    ensure_admin_or_self(claims, owner_id)

    preference = NotificationPreference(
        **request.model_dump(exclude={"user_id"}), user_id=owner_id
    )

    use_case = CreateNotificationPreferenceUseCase(uow)
    result = await use_case.execute(actor_id(claims), preference)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateNotificationPreferenceRequest(BaseModel):
    email_enabled: Optional[bool] = None
    sms_enabled: Optional[bool] = None
    in_app_enabled: Optional[bool] = None
    billing_emails: Optional[bool] = None
    product_emails: Optional[bool] = None
    marketing_emails: Optional[bool] = None


register_crud_routes(
    router,
    repository="notification_preferences",
    entity_type=NotificationPreference,
    response_model=NotificationPreferenceResponse,
    not_found_code="NOTIFICATION_PREFERENCE_NOT_FOUND",
    update_model=UpdateNotificationPreferenceRequest,
    scope_field="user_id",
    owner_field="user_id",
    operations=("get", "list", "update", "delete"),
)
