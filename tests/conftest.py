"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, integration, e2e).

Fixtures:
    - engine / session_factory: Fresh in-memory SQLite database per test
    - unit_of_work: SqlAlchemyUnitOfWork over that database
    - password_hasher: Argon2 hasher with minimal cost (fast tests)
    - token_service: JWT service with a test secret
    - user_factory: Persist users directly through the unit of work
    - app / client: FastAPI app wired to the test database, and its TestClient
    - auth_headers: Bearer header of a freshly registered user

Architecture Notes:
    - Environment is configured BEFORE importing src (Settings are cached)
    - Every test gets its own in-memory database (StaticPool engine), so no
      cleanup between tests is needed
    - TestClient doesn't require running server; it is not entered as a
      context manager, so the startup lifespan does not run

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(client, auth_headers):
        response = client.post("/api/tasks", json={...}, headers=auth_headers)
        assert response.status_code == 201
"""

import logging
import os
from typing import Callable, Generator

os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SEED_USER_EMAIL", None)
os.environ.pop("SEED_USER_PASSWORD", None)

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.api.dependencies import (
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)
from src.api.main import create_app
from src.domain.identity.entities.user import User
from src.infrastructure.persistence.database.connection import (
    build_engine,
    build_session_factory,
    init_schema,
)
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from src.infrastructure.security.jwt_token_service import JwtTokenService
from src.infrastructure.security.password_hasher import Argon2PasswordHasher

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

TEST_JWT_SECRET = os.environ["JWT_SECRET"]
DEFAULT_PASSWORD = "s3cret-password"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """
    Provide an isolated in-memory SQLite engine with the schema created.

    Scope: function (fresh database for every test)
    """
    test_engine = build_engine("sqlite://")
    init_schema(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return build_session_factory(engine)


@pytest.fixture
def unit_of_work(session_factory: sessionmaker[Session]) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory)


# ============================================================================
# SECURITY FIXTURES
# ============================================================================


@pytest.fixture(scope="session")
def password_hasher() -> Argon2PasswordHasher:
    """
    Argon2 hasher with minimal cost parameters.

    Same algorithm as production, a fraction of the CPU time.
    """
    fast_hasher = Argon2Hasher(time_cost=1, memory_cost=1024, parallelism=1)
    return Argon2PasswordHasher(PasswordHash((fast_hasher,)))


@pytest.fixture(scope="session")
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=TEST_JWT_SECRET, algorithm="HS256", expire_minutes=5)


@pytest.fixture
def user_factory(
    session_factory: sessionmaker[Session],
    password_hasher: Argon2PasswordHasher,
) -> Callable[..., User]:
    """
    Create and persist users.

    Examples:
        >>> alice = user_factory("Alice", "alice@example.com")
    """

    def _create(
        name: str = "Alice",
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
    ) -> User:
        user = User.register(
            name=name, email=email, password_hash=password_hasher.hash(password)
        )
        with SqlAlchemyUnitOfWork(session_factory) as uow:
            uow.users.add(user)
            uow.commit()
        return user

    return _create


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def app(
    session_factory: sessionmaker[Session],
    password_hasher: Argon2PasswordHasher,
    token_service: JwtTokenService,
) -> Generator[FastAPI, None, None]:
    """
    Provide a FastAPI app whose dependencies use the test database.
    """
    application = create_app()
    application.dependency_overrides[get_unit_of_work] = lambda: SqlAlchemyUnitOfWork(
        session_factory
    )
    application.dependency_overrides[get_password_hasher] = lambda: password_hasher
    application.dependency_overrides[get_token_service] = lambda: token_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """
    FastAPI TestClient for testing endpoints.

    Example:
        >>> def test_health_endpoint(client):
        ...     response = client.get("/health")
        ...     assert response.status_code == 200
    """
    return TestClient(app)


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., dict]:
    """
    Register a user through the API and return the response body.
    """

    def _register(
        name: str = "Alice",
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
    ) -> dict:
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register_user: Callable[..., dict]) -> dict[str, str]:
    """Authorization header for a freshly registered user."""
    body = register_user()
    return {"Authorization": f"Bearer {body['token']}"}


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers for test categorization.

    Markers:
        - e2e: End-to-end tests (full HTTP workflows)
        - integration: Integration tests (services over a real database)
        - unit: Unit tests (no external dependencies)
        - slow: Slow tests (>1s execution time)

    Usage:
        @pytest.mark.e2e
        def test_full_workflow():
            ...

        # Run only unit tests:
        pytest -m unit

        # Skip slow tests:
        pytest -m "not slow"
    """
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full HTTP workflows)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (services over a real database)"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests (no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests (>1s execution time)"
    )


def pytest_collection_modifyitems(config, items):
    """
    Pytest collection hook.

    Automatically adds 'slow' marker to E2E tests.
    """
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(pytest.mark.slow)
