"""
Tests for User entity and CallerIdentity.
"""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from src.domain.identity.entities.user import User
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import DomainValidationError


def test_register_normalizes_email_and_name():
    user = User.register(" Alice ", "  Alice@Example.COM ", "hash")

    assert user.name == "Alice"
    assert user.email == "alice@example.com"
    assert user.created_on.tzinfo is not None


def test_register_rejects_blank_name_and_bad_email():
    with pytest.raises(DomainValidationError) as exc_info:
        User.register("", "not-an-email", "hash")

    assert exc_info.value.errors == [
        "name must not be empty",
        "email 'not-an-email' is not a valid email address",
    ]


@pytest.mark.parametrize("email", ["@example.com", "alice@", ""])
def test_validate_profile_rejects_malformed_emails(email):
    assert User.validate_profile("Alice", email)


def test_validate_profile_accepts_valid_input():
    assert User.validate_profile("Alice", "alice@example.com") == []


def test_caller_identity_is_immutable():
    caller = CallerIdentity(user_id=uuid4(), name="Alice")

    with pytest.raises(FrozenInstanceError):
        caller.name = "Bob"
