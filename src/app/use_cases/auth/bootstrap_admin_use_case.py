"""
Bootstrap Admin Use Case

Creates the default administrator at startup when it does not exist yet.
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import record_audit, snapshot
from src.app.use_cases.users.access import ensure_role
from src.app.use_cases.users.dtos import CreateUserCommand
from src.domain.entities import ADMIN_ROLE, USER_ROLE, User
from src.domain.lifecycle import prepare_new_user
from src.libs.result import Result, Return
from .dtos import BootstrapAdminResponse

logger = logging.getLogger(__name__)


class BootstrapAdminUseCase:
    """
    Ensure the reserved roles and the default admin user exist.

    Idempotent: an existing user with the admin email is left untouched.
    The password goes through the same hashing step as every other user.

    Raises:
        CredentialError: the configured admin password cannot be hashed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[BootstrapAdminResponse]:
        async with self.uow:
            admin_role = await ensure_role(self.uow, ADMIN_ROLE)
            await ensure_role(self.uow, USER_ROLE)

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None:
                await self.uow.commit()
                return Return.ok(BootstrapAdminResponse(created=False, user_id=existing_user.id))

            command = CreateUserCommand(email=email, password=password, name="Admin User")
            user = User(email=email, name=command.name, verified=True)
            prepare_new_user(user, command)
            user.verification_code = None

            user = await self.uow.users.create(user)
            await self.uow.users.add_role(user.id, admin_role.id)
            await record_audit(
                self.uow, None, "bootstrap_admin", user, {"created": snapshot(user)}
            )
            await self.uow.commit()

            logger.info(f"Default admin user created: {user.id}")
            return Return.ok(BootstrapAdminResponse(created=True, user_id=user.id))
