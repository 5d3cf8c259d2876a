from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class ConstraintViolationError(Exception):
    """Raised by repositories when the store rejects a write (unique / foreign key)"""


class ICrudRepository(ABC, Generic[T]):
    """Repository interface for soft-deletable entities - application layer"""

    @abstractmethod
    async def get_by_id(self, entity_id: int, include_deleted: bool = False) -> Optional[T]:
        """Get entity by ID; soft-deleted rows only when include_deleted"""
        pass

    @abstractmethod
    async def list(
        self,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0,
        **filters: Any,
    ) -> List[T]:
        """List entities matching equality filters, oldest first"""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Create a new entity"""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update existing entity"""
        pass

    @abstractmethod
    async def soft_delete(self, entity: T) -> T:
        """Mark entity as deleted without removing the row"""
        pass


class IAppendOnlyRepository(ABC, Generic[T]):
    """Repository interface for immutable log records - no update or delete"""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Append a new record"""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get record by ID"""
        pass

    @abstractmethod
    async def list_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, **filters: Any
    ) -> Tuple[List[T], Optional[str]]:
        """
        List records newest first with cursor-based pagination.

        Returns:
            Tuple of (records, next_cursor); next_cursor is None on the last page
        """
        pass
