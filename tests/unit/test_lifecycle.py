from src.app.use_cases.users import CreateUserCommand, UpdateUserCommand
from src.domain.credentials import hash_password, verify_password
from src.domain.entities import APIKey, Subscription, SubscriptionStatus, User
from src.domain.lifecycle import (
    apply_user_changes,
    prepare_new_api_key,
    prepare_new_subscription,
    prepare_new_user,
)


def test_new_user_password_is_hashed_and_blanked():
    command = CreateUserCommand(email="user@acme.com", password="SecurePass123!")
    user = User(email=command.email)

    prepare_new_user(user, command)

    assert command.password == ""
    assert user.password_hash != "SecurePass123!"
    assert verify_password("SecurePass123!", user.password_hash)


def test_new_user_gets_43_char_verification_code():
    first = prepare_new_user(User(email="a@acme.com"), CreateUserCommand(email="a@acme.com"))
    second = prepare_new_user(User(email="b@acme.com"), CreateUserCommand(email="b@acme.com"))

    assert len(first.verification_code) == 43
    assert len(second.verification_code) == 43
    assert first.verification_code != second.verification_code


def test_new_user_without_password_keeps_empty_hash():
    user = prepare_new_user(User(email="user@acme.com"), CreateUserCommand(email="user@acme.com"))

    assert user.password_hash == ""
    assert user.verification_code


def test_update_without_password_leaves_hash_untouched():
    original_hash = hash_password("SecurePass123!")
    user = User(email="user@acme.com", password_hash=original_hash)
    command = UpdateUserCommand(name="Renamed")

    apply_user_changes(user, command, {"name": "Renamed"}, password_changed=False)

    assert user.name == "Renamed"
    assert user.password_hash == original_hash


def test_update_with_password_rehashes_and_blanks():
    original_hash = hash_password("SecurePass123!")
    user = User(email="user@acme.com", password_hash=original_hash)
    command = UpdateUserCommand(password="NewSecret456!")

    apply_user_changes(user, command, {}, password_changed=True)

    assert command.password == ""
    assert user.password_hash != original_hash
    assert verify_password("NewSecret456!", user.password_hash)


def test_api_keys_are_distinct_43_char_tokens():
    first = prepare_new_api_key(APIKey(user_id=1, organization_id=1))
    second = prepare_new_api_key(APIKey(user_id=1, organization_id=1))

    assert len(first.key) == 43
    assert len(second.key) == 43
    assert first.key != second.key


def test_subscription_defaults_to_trialing_now():
    subscription = prepare_new_subscription(Subscription(organization_id=1))

    assert subscription.status == SubscriptionStatus.trialing
    assert subscription.start_date is not None


def test_subscription_keeps_explicit_values():
    subscription = Subscription(organization_id=1, status=SubscriptionStatus.active)

    prepare_new_subscription(subscription)

    assert subscription.status == SubscriptionStatus.active
