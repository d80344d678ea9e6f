"""
Database Module

SQLAlchemy engine, session factory and ORM models.

Exports:
    - Base, UserModel, TaskModel, UTCDateTime
    - build_engine, build_session_factory, get_engine, get_session_factory
    - init_schema, health_check, close_connections
"""

from .connection import (
    build_engine,
    build_session_factory,
    close_connections,
    get_engine,
    get_session_factory,
    health_check,
    init_schema,
)
from .models import Base, TaskModel, UserModel, UTCDateTime

__all__ = [
    "Base",
    "UserModel",
    "TaskModel",
    "UTCDateTime",
    "build_engine",
    "build_session_factory",
    "get_engine",
    "get_session_factory",
    "init_schema",
    "health_check",
    "close_connections",
]
