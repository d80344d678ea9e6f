"""
Tests for JwtTokenService.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import InvalidTokenError
from src.infrastructure.security.jwt_token_service import JwtTokenService
from src.shared.config import Settings

SECRET = "unit-test-secret-that-is-at-least-32-bytes"


@pytest.fixture
def service():
    return JwtTokenService(secret=SECRET, expire_minutes=30)


@pytest.fixture
def caller():
    return CallerIdentity(user_id=uuid4(), name="Alice")


def test_issue_then_verify_returns_identity(service, caller):
    issued = service.issue(caller)

    assert service.verify(issued.token) == caller


def test_issue_sets_claims_and_expiry(service, caller):
    before = datetime.now(timezone.utc)

    issued = service.issue(caller)

    claims = jwt.decode(issued.token, SECRET, algorithms=["HS256"])
    assert claims["sub"] == str(caller.user_id)
    assert claims["name"] == "Alice"
    assert claims["exp"] - claims["iat"] == 30 * 60
    assert issued.expires_at > before + timedelta(minutes=29)


def test_expired_token_is_rejected(service, caller):
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": str(caller.user_id), "name": "Alice", "iat": past, "exp": past + timedelta(minutes=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError, match="Token has expired"):
        service.verify(token)


def test_token_signed_with_other_secret_is_rejected(service, caller):
    other = JwtTokenService(secret="another-secret-that-is-also-32-bytes-long")

    with pytest.raises(InvalidTokenError, match="Invalid token"):
        service.verify(other.issue(caller).token)


def test_tampered_token_is_rejected(service, caller):
    token = service.issue(caller).token
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidTokenError):
        service.verify(tampered)


@pytest.mark.parametrize("missing", ["sub", "name", "exp", "iat"])
def test_missing_claim_is_rejected(service, caller, missing):
    now = datetime.now(timezone.utc)
    claims = {"sub": str(caller.user_id), "name": "Alice", "iat": now, "exp": now + timedelta(minutes=5)}
    del claims[missing]

    with pytest.raises(InvalidTokenError):
        service.verify(jwt.encode(claims, SECRET, algorithm="HS256"))


def test_non_uuid_subject_is_rejected(service):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "admin", "name": "x", "iat": now, "exp": now + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError, match="Invalid token"):
        service.verify(token)


def test_garbage_is_rejected(service):
    with pytest.raises(InvalidTokenError):
        service.verify("not-a-jwt")


def test_from_settings():
    settings = Settings(jwt_secret=SECRET, jwt_expire_minutes=15)

    service = JwtTokenService.from_settings(settings)

    assert service.secret == SECRET
    assert service.expire_minutes == 15


@pytest.mark.parametrize("kwargs", [{"secret": ""}, {"secret": SECRET, "expire_minutes": 0}])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        JwtTokenService(**kwargs)
