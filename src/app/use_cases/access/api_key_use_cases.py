"""
API Key Use Cases

Issue API keys and record their use.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    constraint_error,
    record_audit,
    snapshot,
    unauthorized_error,
)
from src.domain.base import utcnow
from src.domain.entities import APIKey
from src.domain.lifecycle import prepare_new_api_key
from src.libs.result import Error, Result, Return
from .dtos import APIKeyResponse, IssueAPIKeyCommand, IssuedAPIKeyResponse

logger = logging.getLogger(__name__)


class IssueAPIKeyUseCase:
    """
    Issue a new API key for a user within an organization.

    Business Rules:
    - The key is 32 random bytes, base64url encoded (43 chars)
    - Uniqueness is left to the unique column; a collision surfaces as
      CONSTRAINT_VIOLATION rather than being retried
    - The key is returned once and never logged or audited

    Errors:
        - USER_NOT_FOUND
        - ORGANIZATION_NOT_FOUND
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: IssueAPIKeyCommand
    ) -> Result[IssuedAPIKeyResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            organization = await self.uow.organizations.get_by_id(command.organization_id)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organization not found"))

            api_key = APIKey(
                user_id=command.user_id,
                organization_id=command.organization_id,
                name=command.name,
                permissions=command.permissions,
                expires_at=command.expires_at,
            )
            prepare_new_api_key(api_key)

            try:
                api_key = await self.uow.api_keys.create(api_key)
                await record_audit(
                    self.uow, actor_id, "create", api_key, {"created": snapshot(api_key)}
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            logger.info(f"API key {api_key.id} issued for user {api_key.user_id}")
            return Return.ok(IssuedAPIKeyResponse.model_validate(api_key, from_attributes=True))


class TouchAPIKeyUseCase:
    """
    Record that an API key was used: last_used_at = now.

    Errors:
        - API_KEY_NOT_FOUND
        - UNAUTHORIZED: owner_id given and the key belongs to another user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, api_key_id: int, owner_id: Optional[int] = None
    ) -> Result[APIKeyResponse]:
        async with self.uow:
            api_key = await self.uow.api_keys.get_by_id(api_key_id)
            if api_key is None:
                return Return.err(Error("API_KEY_NOT_FOUND", "API key not found"))

            if owner_id is not None and api_key.user_id != owner_id:
                logger.warning(f"User {owner_id} refused touch of API key {api_key.id}")
                return Return.err(unauthorized_error())

            api_key.last_used_at = utcnow()
            api_key = await self.uow.api_keys.update(api_key)
            await self.uow.commit()

            return Return.ok(APIKeyResponse.model_validate(api_key, from_attributes=True))
