import base64
import logging
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.sql.expression import SelectOfScalar

from src.app.repositories.base_repository import ConstraintViolationError
from src.domain.base import BaseRecord, utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseRecord)


async def flush_or_raise(session: AsyncSession) -> None:
    """Flush pending writes, translating store constraint failures"""
    try:
        await session.flush()
    except IntegrityError as exc:
        logger.warning(f"Constraint violation: {exc.orig}")
        raise ConstraintViolationError(str(exc.orig)) from exc


def encode_cursor(record_id: int) -> str:
    return base64.urlsafe_b64encode(str(record_id).encode("utf-8")).decode("utf-8")


def decode_cursor(cursor: str) -> Optional[int]:
    try:
        return int(base64.urlsafe_b64decode(cursor.encode("utf-8")).decode("utf-8"))
    except (ValueError, TypeError):
        return None


class SqlModelRepository(Generic[T]):
    """
    Shared SQLModel implementation of ICrudRepository.

    Every read goes through _select(), which hides soft-deleted rows unless
    include_deleted is passed explicitly.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self, include_deleted: bool = False) -> SelectOfScalar[T]:
        stmt = select(self.model)
        if not include_deleted:
            stmt = stmt.where(col(self.model.deleted_at).is_(None))
        return stmt

    def _filtered(self, stmt: SelectOfScalar[T], filters: dict[str, Any]) -> SelectOfScalar[T]:
        for field, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    async def get_by_id(self, entity_id: int, include_deleted: bool = False) -> Optional[T]:
        stmt = self._select(include_deleted).where(self.model.id == entity_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(
        self,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0,
        **filters: Any,
    ) -> List[T]:
        stmt = self._filtered(self._select(include_deleted), filters)
        stmt = stmt.order_by(col(self.model.id)).offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await flush_or_raise(self.session)
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        entity.updated_at = utcnow()
        self.session.add(entity)
        await flush_or_raise(self.session)
        await self.session.refresh(entity)
        return entity

    async def soft_delete(self, entity: T) -> T:
        entity.deleted_at = utcnow()
        return await self.update(entity)

    async def _link(self, link: Any) -> None:
        self.session.add(link)
        await flush_or_raise(self.session)


class SqlModelAppendOnlyRepository(Generic[T]):
    """
    Shared SQLModel implementation of IAppendOnlyRepository.

    Exposes no update or delete path.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: T) -> T:
        """Append a new record (immutable)"""
        self.session.add(entity)
        await flush_or_raise(self.session)
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, **filters: Any
    ) -> Tuple[List[T], Optional[str]]:
        """
        List records newest first with cursor-based pagination.

        Cursor format: base64-encoded id of the last record of the previous page
        """
        stmt = select(self.model)
        for field, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, field) == value)

        if cursor:
            last_id = decode_cursor(cursor)
            # Invalid cursor: start from the newest record
            if last_id is not None:
                stmt = stmt.where(col(self.model.id) < last_id)

        stmt = stmt.order_by(col(self.model.id).desc()).limit(limit + 1)
        result = await self.session.exec(stmt)
        records = list(result.all())

        has_more = len(records) > limit
        if has_more:
            records = records[:limit]

        next_cursor = None
        if has_more and records:
            next_cursor = encode_cursor(records[-1].id)

        return records, next_cursor
