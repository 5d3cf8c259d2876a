from abc import abstractmethod
from typing import Optional

from src.app.repositories.base_repository import ICrudRepository
from src.domain.entities import APIKey, NotificationPreference


class IAPIKeyRepository(ICrudRepository[APIKey]):
    """APIKey repository interface - application layer"""


class INotificationPreferenceRepository(ICrudRepository[NotificationPreference]):
    """NotificationPreference repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[NotificationPreference]:
        """Get live preferences of a user"""
        pass
