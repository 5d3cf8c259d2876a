"""
Notification Preference Use Cases
"""

from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.entities import NotificationPreference
from src.libs.result import Error, Result, Return
from .dtos import NotificationPreferenceResponse


class CreateNotificationPreferenceUseCase:
    """
    Create the notification preferences of a user.

    Errors:
        - USER_NOT_FOUND
        - NOTIFICATION_PREFERENCE_ALREADY_EXISTS: user already has live preferences
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], preference: NotificationPreference
    ) -> Result[NotificationPreferenceResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(preference.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            existing = await self.uow.notification_preferences.get_by_user_id(user.id)
            if existing:
                return Return.err(
                    Error(
                        "NOTIFICATION_PREFERENCE_ALREADY_EXISTS",
                        "Notification preferences already exist for this user",
                    )
                )

            try:
                preference = await self.uow.notification_preferences.create(preference)
                await record_audit(
                    self.uow, actor_id, "create", preference, {"created": snapshot(preference)}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(
                NotificationPreferenceResponse.model_validate(preference, from_attributes=True)
            )
