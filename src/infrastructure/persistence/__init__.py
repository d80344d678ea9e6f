"""
Persistence Infrastructure Module

Relational persistence with SQLAlchemy.

Exports:
    From database:
        - build_engine, get_engine, get_session_factory
        - init_schema, health_check, close_connections

    From repositories:
        - SqlAlchemyUserRepository, SqlAlchemyTaskRepository

    Unit of work and seeding:
        - SqlAlchemyUnitOfWork
        - seed_default_user
"""

from .database import (
    build_engine,
    build_session_factory,
    close_connections,
    get_engine,
    get_session_factory,
    health_check,
    init_schema,
)
from .repositories import SqlAlchemyTaskRepository, SqlAlchemyUserRepository
from .seed import seed_default_user
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "build_engine",
    "build_session_factory",
    "get_engine",
    "get_session_factory",
    "init_schema",
    "health_check",
    "close_connections",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUnitOfWork",
    "seed_default_user",
]
