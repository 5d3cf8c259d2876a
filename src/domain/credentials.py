"""
Credential primitives: password hashing and random token issuance.
"""

import secrets

import bcrypt

BCRYPT_COST = 12
BCRYPT_MAX_PASSWORD_BYTES = 72
TOKEN_BYTES = 32


class CredentialError(Exception):
    """Raised when a password cannot be hashed"""


def hash_password(password: str, cost: int = BCRYPT_COST) -> str:
    """
    Hash a password with bcrypt.

    Passwords longer than bcrypt's 72-byte input limit are rejected rather
    than silently truncated.

    Raises:
        CredentialError: password is empty, too long, or bcrypt rejected it
    """
    encoded = password.encode("utf-8")
    if not encoded:
        raise CredentialError("Password must not be empty")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise CredentialError(
            f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes"
        )
    try:
        hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(cost))
    except ValueError as exc:
        raise CredentialError(str(exc)) from exc
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of a password against a stored bcrypt hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def generate_secure_token(nbytes: int = TOKEN_BYTES) -> str:
    """
    URL-safe random token from the OS CSPRNG.

    32 bytes encode to 43 base64url characters (no padding). There is no
    fallback source: if the OS cannot supply randomness the error propagates.
    """
    return secrets.token_urlsafe(nbytes)
