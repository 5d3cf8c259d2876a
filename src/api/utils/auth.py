"""
Request Gates

Bearer-token checks run as route dependencies, before the handler. Every
failure answers 401 UNAUTHORIZED with the same body.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, status

from src.api.error import ClientError
from src.api.utils.jwt import TokenService, extract_role
from src.depends import get_token_service
from src.domain.entities import ADMIN_ROLE, USER_ROLE
from src.libs.result import Error

logger = logging.getLogger(__name__)


def extract_token(authorization: Optional[str]) -> str:
    """
    Token part of an Authorization header.

    The header is split on single spaces; exactly two segments yield the
    second one, anything else yields "".
    """
    if not authorization:
        return ""
    parts = authorization.split(" ")
    if len(parts) != 2:
        return ""
    return parts[1]


def unauthorized() -> ClientError:
    return ClientError(
        Error("UNAUTHORIZED", "Unauthorized"), status_code=status.HTTP_401_UNAUTHORIZED
    )


def _authorize(
    authorization: Optional[str], token_service: TokenService, allowed_roles: set
) -> dict:
    payload = token_service.verify(extract_token(authorization))
    role = extract_role(payload)
    if role is None or role not in allowed_roles:
        logger.warning("Request rejected by role gate")
        raise unauthorized()
    return payload


def require_role(role: str):
    """Dependency factory: the token's role must equal `role` exactly"""

    async def gate(
        authorization: Optional[str] = Header(None),
        token_service: TokenService = Depends(get_token_service),
    ) -> dict:
        return _authorize(authorization, token_service, {role})

    return gate


async def require_user_or_admin(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> dict:
    """Dependency: the token role must be either user or admin"""
    return _authorize(authorization, token_service, {USER_ROLE, ADMIN_ROLE})


require_admin = require_role(ADMIN_ROLE)


def actor_id(claims: dict) -> Optional[int]:
    """User id of the caller, from the "id" claim"""
    value = claims.get("id")
    return value if isinstance(value, int) else None


def is_admin(claims: dict) -> bool:
    return claims.get("role") == ADMIN_ROLE


def ensure_admin_or_self(claims: dict, user_id: int) -> None:
    """Non-admin callers may only act on their own user id"""
    if not is_admin(claims) and actor_id(claims) != user_id:
        logger.warning(f"User {actor_id(claims)} tried to act on user {user_id}")
        raise unauthorized()


def ensure_include_deleted_allowed(claims: dict, include_deleted: bool) -> None:
    """Listing soft-deleted rows is reserved to admins"""
    if include_deleted and not is_admin(claims):
        raise unauthorized()
