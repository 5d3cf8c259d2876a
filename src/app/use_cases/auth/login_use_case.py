"""
Login Use Case

Authenticates a user and issues a bearer token whose role and permission
claims are resolved from the Role/Permission graph.
"""

import logging

from src.api.utils.jwt import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.access import resolve_access
from src.domain.credentials import verify_password
from src.domain.entities import ActivityLog
from src.libs.result import Error, Result, Return
from .dtos import LoginResponse

logger = logging.getLogger(__name__)

# Valid bcrypt hash of a random string; checked when the email is unknown so
# both failure paths spend the same time hashing
_DUMMY_HASH = "$2b$12$C6UzMDM.H6dfI/f/IKcEeO5jlD6n3pGbdNYnLWlkyHmahTe8tDBvW"


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password fail identically (INVALID_CREDENTIALS)
    - Token role is "admin" when the user holds the admin role, else "user"
    - Token permissions are the union of direct and role-granted permissions
    - A login activity entry is appended
    """

    def __init__(self, uow: UnitOfWork, token_service: TokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                verify_password(password, _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                logger.warning(f"Failed login for user {user.id}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            user = await self.uow.users.get_with_roles(user.id)
            role, roles, permissions = resolve_access(user)

            await self.uow.activity_logs.create(
                ActivityLog(
                    user_id=user.id,
                    activity_type="login",
                    activity_metadata={"role": role, "roles": roles},
                )
            )
            await self.uow.commit()

            access_token = self.token_service.issue(user.id, role, permissions)

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    user_id=user.id,
                    role=role,
                    permissions=permissions,
                )
            )
