"""
Verify User Use Case

Consumes the verification code issued when the user was created.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import record_audit
from src.libs.result import Error, Result, Return
from .dtos import VerifyUserResponse


class VerifyUserUseCase:
    """
    Mark a user as verified.

    Business Rules:
    - The code is single use: it is cleared on success
    - Unknown codes fail with INVALID_CODE
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str) -> Result[VerifyUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_verification_code(code) if code else None
            if user is None:
                return Return.err(Error("INVALID_CODE", "Invalid verification code"))

            user.verified = True
            user.verification_code = None
            user = await self.uow.users.update(user)

            await record_audit(
                self.uow, user.id, "verify", user, {"verified": {"old": False, "new": True}}
            )
            await self.uow.commit()

            return Return.ok(VerifyUserResponse(status="verified", user_id=user.id))
