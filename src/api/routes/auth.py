from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.jwt import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    VerifyUserResponse,
    VerifyUserUseCase,
)
from src.app.use_cases.users import CreateUserCommand, CreateUserUseCase, UserResponse
from src.depends import get_token_service, get_unit_of_work
from src.domain.entities import USER_ROLE

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to CreateUserCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    name: str = Field("", max_length=255, description="Display name")
    locale: Optional[str] = None
    timezone: Optional[str] = None
    language: Optional[str] = None


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def register(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Self-registration

    Creates a user holding the "user" role. The password is hashed and a
    verification code issued, exactly as for admin-created users.

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 400 Bad Request: CREDENTIAL_ERROR (password longer than 72 bytes)
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = CreateUserCommand(
        email=request.email,
        password=request.password,
        name=request.name,
        locale=request.locale,
        timezone=request.timezone,
        language=request.language,
        role_names=[USER_ROLE],
    )

    use_case = CreateUserUseCase(uow)
    result = await use_case.execute(None, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """
    User Login

    Authenticates the user and returns a bearer token carrying the
    resolved role and permissions.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    use_case = LoginUseCase(uow, token_service)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyRequest(BaseModel):
    code: str = Field(..., min_length=1, description="Verification code")


@router.post("/verify", status_code=status.HTTP_200_OK, response_model=VerifyUserResponse)
async def verify(request: VerifyRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Verify User

    Consumes a verification code and marks its user as verified.

    Raises:
        - 400 Bad Request: INVALID_CODE
    """
    use_case = VerifyUserUseCase(uow)
    result = await use_case.execute(request.code)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
