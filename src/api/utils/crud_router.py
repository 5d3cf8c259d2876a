"""
CRUD Route Registration

Registers the standard POST / GET / GET-list / PUT / DELETE endpoints of a
resource on a router, backed by the generic CRUD use cases. Resources with
their own create or read rules register only the operations they leave
generic and define the rest by hand.
"""

from typing import List, Optional, Sequence, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.api.utils.auth import (
    actor_id,
    ensure_include_deleted_allowed,
    is_admin,
    require_admin,
    require_user_or_admin,
    unauthorized,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    GetEntityUseCase,
    ListEntitiesUseCase,
    ParentRef,
    UpdateEntityUseCase,
)
from src.depends import get_unit_of_work
from src.domain.base import BaseRecord

ALL_OPERATIONS = ("create", "get", "list", "update", "delete")


def register_crud_routes(
    router: APIRouter,
    *,
    repository: str,
    entity_type: Type[BaseRecord],
    response_model: Type[BaseModel],
    not_found_code: str,
    create_model: Optional[Type[BaseModel]] = None,
    update_model: Optional[Type[BaseModel]] = None,
    parents: Sequence[ParentRef] = (),
    write_gate=require_user_or_admin,
    creator_field: Optional[str] = None,
    scope_field: Optional[str] = None,
    owner_field: Optional[str] = None,
    operations: Sequence[str] = ALL_OPERATIONS,
) -> APIRouter:
    """
    Args:
        repository: unit of work attribute holding the resource's repository
        entity_type: table model built from the create payload
        response_model: DTO returned by every endpoint
        not_found_code: error code when the target is missing or deleted
        create_model / update_model: request payloads
        parents: foreign keys checked before create and update
        write_gate: gate of create and update; delete always requires admin
        creator_field: entity field set to the caller's user id on create
        scope_field: optional equality filter exposed on the list endpoint
        owner_field: entity field holding the owning user id; non-admin callers
            only read, list and update their own rows
        operations: subset of ALL_OPERATIONS to register
    """

    def owner_filter(claims: dict) -> Optional[int]:
        if owner_field is None or is_admin(claims):
            return None
        owner_id = actor_id(claims)
        if owner_id is None:
            raise unauthorized()
        return owner_id

    if "create" in operations:

        @router.post("", status_code=status.HTTP_201_CREATED, response_model=response_model)
        async def create_entity(
            request: create_model,
            claims: dict = Depends(write_gate),
            uow: UnitOfWork = Depends(get_unit_of_work),
        ):
            use_case = CreateEntityUseCase(
                uow, repository, response_model, not_found_code, parents
            )
            values = request.model_dump()
            if creator_field:
                values[creator_field] = actor_id(claims)
            result = await use_case.execute(actor_id(claims), entity_type(**values))

            if result.is_err():
                raise_for_error(result.error)

            return result.value

    if "get" in operations:

        @router.get("/{entity_id}", status_code=status.HTTP_200_OK, response_model=response_model)
        async def get_entity(
            entity_id: int,
            include_deleted: bool = Query(False),
            claims: dict = Depends(require_user_or_admin),
            uow: UnitOfWork = Depends(get_unit_of_work),
        ):
            ensure_include_deleted_allowed(claims, include_deleted)

            use_case = GetEntityUseCase(
                uow, repository, response_model, not_found_code, owner_field
            )
            result = await use_case.execute(
                entity_id, include_deleted=include_deleted, owner_id=owner_filter(claims)
            )

            if result.is_err():
                raise_for_error(result.error)

            return result.value

    if "list" in operations:
        if scope_field:

            @router.get("", status_code=status.HTTP_200_OK, response_model=List[response_model])
            async def list_scoped_entities(
                scope_id: Optional[int] = Query(None, alias=scope_field),
                include_deleted: bool = Query(False),
                limit: int = Query(100, ge=1, le=500),
                offset: int = Query(0, ge=0),
                claims: dict = Depends(require_user_or_admin),
                uow: UnitOfWork = Depends(get_unit_of_work),
            ):
                ensure_include_deleted_allowed(claims, include_deleted)

                filters = {scope_field: scope_id}
                owner_id = owner_filter(claims)
                if owner_id is not None:
                    filters[owner_field] = owner_id

                use_case = ListEntitiesUseCase(uow, repository, response_model, not_found_code)
                result = await use_case.execute(
                    include_deleted=include_deleted, limit=limit, offset=offset, **filters
                )

                if result.is_err():
                    raise_for_error(result.error)

                return result.value

        else:

            @router.get("", status_code=status.HTTP_200_OK, response_model=List[response_model])
            async def list_entities(
                include_deleted: bool = Query(False),
                limit: int = Query(100, ge=1, le=500),
                offset: int = Query(0, ge=0),
                claims: dict = Depends(require_user_or_admin),
                uow: UnitOfWork = Depends(get_unit_of_work),
            ):
                ensure_include_deleted_allowed(claims, include_deleted)

                filters = {}
                owner_id = owner_filter(claims)
                if owner_id is not None:
                    filters[owner_field] = owner_id

                use_case = ListEntitiesUseCase(uow, repository, response_model, not_found_code)
                result = await use_case.execute(
                    include_deleted=include_deleted, limit=limit, offset=offset, **filters
                )

                if result.is_err():
                    raise_for_error(result.error)

                return result.value

    if "update" in operations:

        @router.put("/{entity_id}", status_code=status.HTTP_200_OK, response_model=response_model)
        async def update_entity(
            entity_id: int,
            request: update_model,
            claims: dict = Depends(write_gate),
            uow: UnitOfWork = Depends(get_unit_of_work),
        ):
            use_case = UpdateEntityUseCase(
                uow, repository, response_model, not_found_code, parents, owner_field
            )
            result = await use_case.execute(
                actor_id(claims),
                entity_id,
                request.model_dump(exclude_unset=True, exclude_none=True),
                owner_id=owner_filter(claims),
            )

            if result.is_err():
                raise_for_error(result.error)

            return result.value

    if "delete" in operations:

        @router.delete("/{entity_id}", status_code=status.HTTP_200_OK, response_model=response_model)
        async def delete_entity(
            entity_id: int,
            claims: dict = Depends(require_admin),
            uow: UnitOfWork = Depends(get_unit_of_work),
        ):
            use_case = DeleteEntityUseCase(uow, repository, response_model, not_found_code)
            result = await use_case.execute(actor_id(claims), entity_id)

            if result.is_err():
                raise_for_error(result.error)

            return result.value

    return router
