"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain and Application
Layers. Handles all external dependencies: the relational database,
password hashing and token signing.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - Implements Application Layer ports (UnitOfWorkProtocol,
      PasswordHasherProtocol, TokenServiceProtocol)
    - Depends on external libraries (SQLAlchemy, pwdlib, PyJWT)
    - No Domain business logic (only technical implementations)

Modules:
    - persistence: Engine/session management, ORM models, repositories,
      unit of work, startup seeding
    - security: Argon2 password hashing, JWT bearer tokens

Usage:
    >>> from src.infrastructure import SqlAlchemyUnitOfWork, get_session_factory
    >>> uow = SqlAlchemyUnitOfWork(get_session_factory())
"""

# Persistence
from .persistence import (
    SqlAlchemyTaskRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
    close_connections,
    get_engine,
    get_session_factory,
    health_check,
    init_schema,
    seed_default_user,
)

# Security
from .security import Argon2PasswordHasher, JwtTokenService

__all__ = [
    # Persistence
    "get_engine",
    "get_session_factory",
    "init_schema",
    "health_check",
    "close_connections",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUnitOfWork",
    "seed_default_user",
    # Security
    "Argon2PasswordHasher",
    "JwtTokenService",
]
