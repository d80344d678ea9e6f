"""
Tests for ORM models (UTCDateTime round-trip, constraints).
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, StatementError

from src.infrastructure.persistence.database.models import TaskModel, UserModel

CEST = timezone(timedelta(hours=2))


def make_user(**overrides) -> UserModel:
    values = {
        "id": uuid4(),
        "name": "Alice",
        "email": f"{uuid4().hex}@example.com",
        "password_hash": "hash",
        "created_on": datetime(2025, 1, 1, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return UserModel(**values)


def make_task(user: UserModel, **overrides) -> TaskModel:
    created = datetime(2025, 1, 1, tzinfo=timezone.utc)
    values = {
        "id": uuid4(),
        "title": "t",
        "description": "d",
        "status": "Pending",
        "remarks": "r",
        "created_on": created,
        "updated_on": created,
        "created_by": user.id,
        "updated_by": user.id,
    }
    values.update(overrides)
    return TaskModel(**values)


def test_timestamps_round_trip_as_aware_utc(session_factory):
    local_time = datetime(2025, 6, 1, 14, 0, tzinfo=CEST)
    user = make_user(created_on=local_time)

    with session_factory() as session:
        session.add(user)
        session.commit()

    with session_factory() as session:
        loaded = session.get(UserModel, user.id)

    assert loaded.created_on.tzinfo == timezone.utc
    assert loaded.created_on == local_time
    assert loaded.created_on.hour == 12


def test_naive_datetime_is_rejected(session_factory):
    with session_factory() as session:
        session.add(make_user(created_on=datetime(2025, 1, 1)))
        with pytest.raises((StatementError, ValueError)):
            session.commit()


def test_task_foreign_key_is_enforced(session_factory):
    ghost = make_user()

    with session_factory() as session:
        session.add(make_task(ghost))
        with pytest.raises(IntegrityError):
            session.commit()


def test_unique_email_is_enforced(session_factory):
    with session_factory() as session:
        session.add(make_user(email="same@example.com"))
        session.commit()
        session.add(make_user(email="same@example.com"))
        with pytest.raises(IntegrityError):
            session.commit()


def test_updated_on_cannot_precede_created_on(session_factory):
    user = make_user()
    created = datetime(2025, 1, 2, tzinfo=timezone.utc)

    with session_factory() as session:
        session.add(user)
        session.commit()
        session.add(make_task(user, created_on=created, updated_on=created - timedelta(days=1)))
        with pytest.raises(IntegrityError):
            session.commit()
