"""
ORM Models

SQLAlchemy table mappings for users and tasks.

Schema:
    users: id, name, email (unique index), password_hash, created_on
    tasks: id, title, description, due_date, status, remarks,
           created_on, updated_on, created_by -> users.id, updated_by -> users.id
           indexes on title, status, due_date, created_by, updated_by

Architecture Notes:
    - Infrastructure Layer only; the Domain never sees these classes
    - Column names match Task/User entity field names one to one, which
      lets the generic repository map entities without per-field code
    - Timestamps are stored as naive UTC and loaded as aware UTC
      (UTCDateTime) so every backend round-trips the same values
"""

import uuid
from datetime import date, datetime, timezone
from typing import Any, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Dialect,
    ForeignKey,
    Index,
    String,
    Text,
    TypeDecorator,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class UTCDateTime(TypeDecorator[datetime]):
    """
    DateTime column that always returns timezone-aware UTC values.

    Naive datetimes are rejected on write; aware ones are converted to UTC.
    """

    impl = DateTime(timezone=False)
    cache_ok = True

    def process_bind_param(
        self, value: Optional[datetime], dialect: Dialect
    ) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError(f"Naive datetime cannot be stored: {value!r}")
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(
        self, value: Optional[Any], dialect: Dialect
    ) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class UserModel(Base):
    """
    users table - registered accounts.
    """

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_email", "email", unique=True),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_on: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"


class TaskModel(Base):
    """
    tasks table - tracked units of work.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_title", "title"),
        Index("ix_tasks_status", "status"),
        Index("ix_tasks_due_date", "due_date"),
        Index("ix_tasks_created_by", "created_by"),
        Index("ix_tasks_updated_by", "updated_by"),
        CheckConstraint("updated_on >= created_on", name="ck_tasks_updated_after_created"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    remarks: Mapped[str] = mapped_column(Text, nullable=False)
    created_on: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_on: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    created_by: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False
    )
    updated_by: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, title='{self.title}', status='{self.status}')>"
