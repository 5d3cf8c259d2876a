"""
Generic CRUD Use Cases

Pass-through create/read/update/delete for entities without lifecycle
rules of their own. Each use case is bound to one repository of the unit of
work and one response DTO; writes append an audit entry and commit once.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import BaseRecord
from src.libs.result import Error, Result, Return
from .audit_trail import diff_fields, record_audit, snapshot

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


def not_found_error(code: str) -> Error:
    label = code.removesuffix("_NOT_FOUND").replace("_", " ")
    return Error(code, f"{label.capitalize()} not found")


def unauthorized_error() -> Error:
    return Error("UNAUTHORIZED", "Unauthorized")


def constraint_error(exc: ConstraintViolationError) -> Error:
    return Error(
        "CONSTRAINT_VIOLATION",
        "The request conflicts with existing data",
        reason=str(exc),
    )


@dataclass(frozen=True)
class ParentRef:
    """A foreign key that must resolve to a live row before a write"""

    field: str
    repository: str
    error_code: str
    required: bool = True


async def check_parents(
    uow: UnitOfWork, values: Dict[str, Any], parents: Sequence[ParentRef]
) -> Optional[Error]:
    for parent in parents:
        parent_id = values.get(parent.field)
        if parent_id is None:
            if parent.required:
                return Error(parent.error_code, f"{parent.field} is required")
            continue
        repository = getattr(uow, parent.repository)
        if await repository.get_by_id(parent_id) is None:
            return not_found_error(parent.error_code)
    return None


class CrudUseCase(Generic[R]):
    """
    Base of the generic use cases.

    owner_field names the entity field holding the owning user id. When set,
    reads and writes given an owner_id are refused on rows owned by someone else.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        repository: str,
        response_type: Type[R],
        not_found_code: str,
        owner_field: Optional[str] = None,
    ):
        self.uow = uow
        self.repository_name = repository
        self.response_type = response_type
        self.not_found_code = not_found_code
        self.owner_field = owner_field

    @property
    def repository(self):
        return getattr(self.uow, self.repository_name)

    def to_response(self, entity: BaseRecord) -> R:
        return self.response_type.model_validate(entity, from_attributes=True)

    def not_found(self) -> Error:
        return not_found_error(self.not_found_code)

    def check_owner(self, entity: BaseRecord, owner_id: Optional[int]) -> Optional[Error]:
        if owner_id is None or self.owner_field is None:
            return None
        if getattr(entity, self.owner_field) != owner_id:
            logger.warning(
                f"User {owner_id} refused access to {entity.__tablename__} {entity.id}"
            )
            return unauthorized_error()
        return None


class GetEntityUseCase(CrudUseCase[R]):
    async def execute(
        self, entity_id: int, include_deleted: bool = False, owner_id: Optional[int] = None
    ) -> Result[R]:
        async with self.uow:
            entity = await self.repository.get_by_id(entity_id, include_deleted=include_deleted)
            if entity is None:
                return Return.err(self.not_found())

            error = self.check_owner(entity, owner_id)
            if error:
                return Return.err(error)
            return Return.ok(self.to_response(entity))


class ListEntitiesUseCase(CrudUseCase[R]):
    async def execute(
        self,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0,
        **filters: Any,
    ) -> Result[List[R]]:
        async with self.uow:
            entities = await self.repository.list(
                include_deleted=include_deleted, limit=limit, offset=offset, **filters
            )
            return Return.ok([self.to_response(entity) for entity in entities])


class CreateEntityUseCase(CrudUseCase[R]):
    """
    Create an entity after checking its parent references.

    Errors:
        - <PARENT>_NOT_FOUND: a referenced parent is missing or soft-deleted
        - CONSTRAINT_VIOLATION: the store rejected the insert
    """

    def __init__(
        self,
        uow: UnitOfWork,
        repository: str,
        response_type: Type[R],
        not_found_code: str,
        parents: Sequence[ParentRef] = (),
    ):
        super().__init__(uow, repository, response_type, not_found_code)
        self.parents = parents

    async def execute(self, actor_id: Optional[int], entity: BaseRecord) -> Result[R]:
        async with self.uow:
            error = await check_parents(self.uow, entity.model_dump(), self.parents)
            if error:
                return Return.err(error)

            try:
                entity = await self.repository.create(entity)
                await record_audit(
                    self.uow, actor_id, "create", entity, {"created": snapshot(entity)}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()
            return Return.ok(self.to_response(entity))


class UpdateEntityUseCase(CrudUseCase[R]):
    """
    Apply field changes to a live entity.

    A None value leaves its field unchanged, so an explicit null never
    reaches a required column.

    Errors:
        - <ENTITY>_NOT_FOUND: entity missing or soft-deleted
        - UNAUTHORIZED: owner_id given and the entity belongs to another user
        - <PARENT>_NOT_FOUND: a changed parent reference does not resolve
        - CONSTRAINT_VIOLATION: the store rejected the update
    """

    def __init__(
        self,
        uow: UnitOfWork,
        repository: str,
        response_type: Type[R],
        not_found_code: str,
        parents: Sequence[ParentRef] = (),
        owner_field: Optional[str] = None,
    ):
        super().__init__(uow, repository, response_type, not_found_code, owner_field)
        self.parents = parents

    async def execute(
        self,
        actor_id: Optional[int],
        entity_id: int,
        changes: Dict[str, Any],
        owner_id: Optional[int] = None,
    ) -> Result[R]:
        changes = {field: value for field, value in changes.items() if value is not None}

        async with self.uow:
            entity = await self.repository.get_by_id(entity_id)
            if entity is None:
                return Return.err(self.not_found())

            error = self.check_owner(entity, owner_id)
            if error:
                return Return.err(error)

            changed_parents = [p for p in self.parents if p.field in changes]
            error = await check_parents(self.uow, changes, changed_parents)
            if error:
                return Return.err(error)

            diff = diff_fields(entity, changes)
            for field, value in changes.items():
                setattr(entity, field, value)

            try:
                entity = await self.repository.update(entity)
                await record_audit(self.uow, actor_id, "update", entity, diff)
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()
            return Return.ok(self.to_response(entity))


class DeleteEntityUseCase(CrudUseCase[R]):
    """
    Soft-delete a live entity: deleted_at is set, the row stays.

    Errors:
        - <ENTITY>_NOT_FOUND: entity missing or already deleted
    """

    async def execute(self, actor_id: Optional[int], entity_id: int) -> Result[R]:
        async with self.uow:
            entity = await self.repository.get_by_id(entity_id)
            if entity is None:
                return Return.err(self.not_found())

            entity = await self.repository.soft_delete(entity)
            await record_audit(
                self.uow,
                actor_id,
                "delete",
                entity,
                {"deleted_at": entity.deleted_at.isoformat()},
            )
            await self.uow.commit()

            logger.info(f"Soft-deleted {entity.__tablename__} {entity_id}")
            return Return.ok(self.to_response(entity))
