import logging
from datetime import UTC, datetime, timedelta
from typing import Any, Dict, List, Optional

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class TokenService:
    """
    HMAC key ring for bearer tokens.

    One active key signs new tokens; every key in the ring verifies. Tokens
    name their signing key in the "kid" header, so retired keys keep
    verifying old tokens until removed from configuration.
    """

    def __init__(
        self,
        keys: Dict[str, str],
        active_key_id: str,
        expire_minutes: int = 60,
    ):
        if active_key_id not in keys:
            raise ValueError(f"Active signing key '{active_key_id}' is not in the key ring")
        self.keys = dict(keys)
        self.active_key_id = active_key_id
        self.expire_minutes = expire_minutes

    @classmethod
    def from_config(cls, config) -> "TokenService":
        keys = dict(getattr(config, "JWT_KEYS", None) or {})
        active_key_id = getattr(config, "JWT_ACTIVE_KEY_ID", "default")
        if not keys:
            keys = {active_key_id: config.JWT_SECRET}
        return cls(keys, active_key_id, config.JWT_EXPIRE_MINUTES)

    def issue(
        self,
        user_id: int,
        role: str,
        permissions: Optional[List[str]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Generate a signed access token

        Args:
            user_id: numeric user identity ("id" claim)
            role: role string checked by the request gate ("role" claim)
            permissions: resolved permission names cached in the token
            expires_delta: token lifetime, defaults to the configured expiry

        Returns:
            JWT token string (HS256)
        """
        now = datetime.now(UTC)
        payload: Dict[str, Any] = {
            "id": user_id,
            "role": role,
            "iat": now,
            "exp": now + (expires_delta or timedelta(minutes=self.expire_minutes)),
        }
        if permissions is not None:
            payload["permissions"] = permissions
        return jwt.encode(
            payload,
            self.keys[self.active_key_id],
            algorithm=ALGORITHM,
            headers={"kid": self.active_key_id},
        )

    def verify(self, token: str) -> Optional[dict]:
        """
        Verify and decode a token

        Returns:
            Decoded payload dict or None if missing, malformed, signed with an
            unknown key or a non-HMAC algorithm, or expired
        """
        if not token:
            return None
        try:
            header = jwt.get_unverified_header(token)
            key_id = header.get("kid") or self.active_key_id
            key = self.keys.get(key_id)
            if key is None:
                logger.warning(f"Token signed with unknown key id: {key_id}")
                return None
            return jwt.decode(token, key, algorithms=[ALGORITHM])
        except JWTError:
            return None


def extract_role(payload: Optional[dict]) -> Optional[str]:
    """The "role" claim if it is a string, else None"""
    if payload is None:
        return None
    role = payload.get("role")
    if not isinstance(role, str):
        return None
    return role
