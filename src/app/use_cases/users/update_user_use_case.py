"""
Update User Use Case

Applies a partial update; the password hash changes only when a new
password is supplied explicitly.
"""

from typing import Optional

from src.app.repositories.base_repository import ConstraintViolationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import constraint_error, diff_fields, record_audit
from src.domain.credentials import CredentialError
from src.domain.lifecycle import apply_user_changes
from src.libs.result import Error, Result, Return
from .dtos import UpdateUserCommand, UserResponse


class UpdateUserUseCase:
    """
    Update an existing user.

    Business Rules:
    - Fields absent from the command are left untouched
    - password present and non-empty -> rehash and blank the plaintext
    - password absent or empty -> stored hash preserved as-is
    - New email must not belong to another user

    Errors:
        - USER_NOT_FOUND
        - EMAIL_ALREADY_EXISTS
        - CREDENTIAL_ERROR
        - CONSTRAINT_VIOLATION
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: Optional[int], user_id: int, command: UpdateUserCommand
    ) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            changes = command.model_dump(
                exclude_unset=True, exclude_none=True, exclude={"password"}
            )
            password_changed = "password" in command.model_fields_set and bool(
                command.password
            )

            if "email" in changes and changes["email"] != user.email:
                other = await self.uow.users.get_by_email(changes["email"])
                if other is not None:
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                    )

            diff = diff_fields(user, changes)
            if password_changed:
                diff["password_hash"] = {"old": "***", "new": "***"}

            try:
                apply_user_changes(user, command, changes, password_changed)
            except CredentialError as exc:
                return Return.err(Error("CREDENTIAL_ERROR", str(exc)))

            try:
                user = await self.uow.users.update(user)
                await record_audit(self.uow, actor_id, "update", user, diff)
            except ConstraintViolationError as exc:
                return Return.err(constraint_error(exc))

            await self.uow.commit()

            return Return.ok(UserResponse.model_validate(user, from_attributes=True))
