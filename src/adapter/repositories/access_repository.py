from typing import Optional

from src.adapter.repositories.base_repository import SqlModelRepository
from src.app.repositories.access_repository import (
    IAPIKeyRepository,
    INotificationPreferenceRepository,
)
from src.domain.entities import APIKey, NotificationPreference


class APIKeyRepository(SqlModelRepository[APIKey], IAPIKeyRepository):
    """APIKey repository implementation using SQLModel"""

    model = APIKey


class NotificationPreferenceRepository(
    SqlModelRepository[NotificationPreference], INotificationPreferenceRepository
):
    """NotificationPreference repository implementation using SQLModel"""

    model = NotificationPreference

    async def get_by_user_id(self, user_id: int) -> Optional[NotificationPreference]:
        stmt = self._select().where(NotificationPreference.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()
