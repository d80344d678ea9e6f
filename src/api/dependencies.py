"""
API Dependencies

FastAPI dependency providers wiring Application services to their
Infrastructure implementations.

Architecture Notes:
    - Part of API Layer (composition root for requests)
    - A new unit of work (and so a new session) per request
    - Password hasher and token service are stateless and shared
    - Tests replace any provider through app.dependency_overrides

Dependency Graph:
    get_task_service  -> get_unit_of_work
    get_auth_service  -> get_unit_of_work, get_password_hasher, get_token_service
    get_current_caller -> bearer credentials, get_token_service
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.ports.password_hasher import PasswordHasherProtocol
from src.application.ports.token_service import TokenServiceProtocol
from src.application.ports.unit_of_work import UnitOfWorkProtocol
from src.application.services.auth_service import AuthService
from src.application.services.task_service import TaskService
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import InvalidTokenError
from src.infrastructure.persistence.database.connection import get_session_factory
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from src.infrastructure.security.jwt_token_service import JwtTokenService
from src.infrastructure.security.password_hasher import Argon2PasswordHasher
from src.shared.config import get_settings

# auto_error=False: a missing header is reported through the error envelope
bearer_scheme = HTTPBearer(auto_error=False)


def get_unit_of_work() -> UnitOfWorkProtocol:
    return SqlAlchemyUnitOfWork(get_session_factory())


@lru_cache
def get_password_hasher() -> PasswordHasherProtocol:
    return Argon2PasswordHasher()


@lru_cache
def get_token_service() -> TokenServiceProtocol:
    return JwtTokenService.from_settings(get_settings())


def get_task_service(
    unit_of_work: UnitOfWorkProtocol = Depends(get_unit_of_work),
) -> TaskService:
    return TaskService(unit_of_work=unit_of_work)


def get_auth_service(
    unit_of_work: UnitOfWorkProtocol = Depends(get_unit_of_work),
    password_hasher: PasswordHasherProtocol = Depends(get_password_hasher),
    token_service: TokenServiceProtocol = Depends(get_token_service),
) -> AuthService:
    return AuthService(
        unit_of_work=unit_of_work,
        password_hasher=password_hasher,
        token_service=token_service,
    )


def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenServiceProtocol = Depends(get_token_service),
) -> CallerIdentity:
    """
    Resolve the authenticated caller from `Authorization: Bearer <token>`.

    Raises:
        InvalidTokenError: If the header is missing, not a bearer token,
            or the token fails verification (mapped to 401)
    """
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Missing bearer token")
    return token_service.verify(credentials.credentials)
