"""
Create User Use Case

Every path that creates a user (admin API, self-registration, bootstrap)
goes through here so the credential invariants always apply.
"""

import logging
from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, record_audit, snapshot
from src.domain.credentials import CredentialError
from src.domain.entities import User
from src.domain.lifecycle import prepare_new_user
from src.libs.result import Error, Result, Return
from .access import ensure_role
from .dtos import CreateUserCommand, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Create a user with hashed credentials.

    Business Logic:
    1. Reject duplicate email (EMAIL_ALREADY_EXISTS)
    2. Hash the password and blank the plaintext on the command
    3. Issue a verification code
    4. Persist the user and attach requested roles
    5. Append an audit entry and commit once

    Errors:
        - EMAIL_ALREADY_EXISTS
        - CREDENTIAL_ERROR: password could not be hashed
        - ROLE_NOT_FOUND: a requested non-reserved role does not exist
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], command: CreateUserCommand
    ) -> Result[UserResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(
                email=command.email,
                name=command.name,
                locale=command.locale,
                timezone=command.timezone,
                language=command.language,
            )
            try:
                prepare_new_user(user, command)
            except CredentialError as exc:
                return Return.err(Error("CREDENTIAL_ERROR", str(exc)))

            try:
                roles = []
                for role_name in command.role_names:
                    role = await ensure_role(self.uow, role_name)
                    if role is None:
                        return Return.err(
                            Error("ROLE_NOT_FOUND", f"Role not found: {role_name}")
                        )
                    roles.append(role)

                user = await self.uow.users.create(user)
                for role in roles:
                    await self.uow.users.add_role(user.id, role.id)

                await record_audit(
                    self.uow,
                    actor_id,
                    "create",
                    user,
                    {"created": snapshot(user), "roles": command.role_names},
                )
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            logger.info(f"User {user.id} created")
            return Return.ok(UserResponse.model_validate(user, from_attributes=True))
