"""
Entity Lifecycle

Creation and update steps that must hold for every persisted instance,
whatever the entry point. Every write path calls these explicitly before
handing the entity to a repository.
"""

from typing import Any, Optional, Protocol

from src.domain.base import utcnow
from src.domain.credentials import generate_secure_token, hash_password
from src.domain.entities import APIKey, Subscription, SubscriptionStatus, User


class PasswordCarrier(Protocol):
    """Any write command that may carry a transient plaintext password"""

    password: Optional[str]


def _consume_password(user: User, carrier: PasswordCarrier) -> None:
    # Hash, then blank the plaintext in the same step
    if carrier.password:
        user.password_hash = hash_password(carrier.password)
        carrier.password = ""


def prepare_new_user(user: User, carrier: PasswordCarrier) -> User:
    """
    Apply creation invariants to a new user.

    - hashes a non-empty password and blanks the plaintext on the carrier
    - issues a fresh verification code

    Raises:
        CredentialError: password could not be hashed
    """
    _consume_password(user, carrier)
    user.verification_code = generate_secure_token()
    return user


def apply_user_changes(
    user: User,
    carrier: PasswordCarrier,
    changes: dict[str, Any],
    password_changed: bool,
) -> User:
    """
    Apply an update to an existing user.

    The password is rehashed only when the caller explicitly supplied one;
    otherwise the stored hash is left untouched.

    Raises:
        CredentialError: password could not be hashed
    """
    for field, value in changes.items():
        setattr(user, field, value)
    if password_changed:
        _consume_password(user, carrier)
    return user


def prepare_new_api_key(api_key: APIKey) -> APIKey:
    """Issue the random key of a new API key"""
    api_key.key = generate_secure_token()
    return api_key


def prepare_new_subscription(subscription: Subscription) -> Subscription:
    """Default status to trialing and start_date to now when unset"""
    if subscription.status is None:
        subscription.status = SubscriptionStatus.trialing
    if subscription.start_date is None:
        subscription.start_date = utcnow()
    return subscription
