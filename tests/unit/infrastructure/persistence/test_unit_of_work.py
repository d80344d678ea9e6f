"""
Tests for SqlAlchemyUnitOfWork.

Covers:
- Commit makes writes durable, leaving without commit discards them
- Session always closed, fresh session per `with` block
- SQLAlchemy errors translated to PersistenceError/IntegrityViolationError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.application.ports.unit_of_work import IntegrityViolationError, PersistenceError
from src.domain.identity.entities.user import User
from src.infrastructure.persistence.unit_of_work import (
    SqlAlchemyUnitOfWork,
    translate_error,
)


def new_user(email: str = "alice@example.com") -> User:
    return User.register("Alice", email, "hash")


def test_commit_persists(unit_of_work):
    user = new_user()

    with unit_of_work as uow:
        uow.users.add(user)
        uow.commit()

    with unit_of_work as uow:
        assert uow.users.get_by_id(user.id) is not None


def test_leaving_without_commit_rolls_back(unit_of_work):
    user = new_user()

    with unit_of_work as uow:
        uow.users.add(user)

    with unit_of_work as uow:
        assert uow.users.get_by_id(user.id) is None


def test_exception_in_block_rolls_back(unit_of_work):
    user = new_user()

    with pytest.raises(RuntimeError):
        with unit_of_work as uow:
            uow.users.add(user)
            uow.session.flush()
            raise RuntimeError("boom")

    with unit_of_work as uow:
        assert uow.users.get_by_id(user.id) is None


def test_each_block_gets_a_new_session(unit_of_work):
    with unit_of_work as uow:
        first = uow.session

    assert unit_of_work.session is None

    with unit_of_work as uow:
        assert uow.session is not first


def test_nested_entry_is_rejected(unit_of_work):
    with unit_of_work:
        with pytest.raises(RuntimeError, match="already active"):
            unit_of_work.__enter__()


def test_commit_outside_block_is_rejected(unit_of_work):
    with pytest.raises(RuntimeError, match="not active"):
        unit_of_work.commit()


def test_duplicate_email_commit_raises_integrity_violation(unit_of_work):
    with unit_of_work as uow:
        uow.users.add(new_user())
        uow.commit()

    with pytest.raises(IntegrityViolationError):
        with unit_of_work as uow:
            uow.users.add(new_user())
            uow.commit()


def test_database_error_inside_block_becomes_persistence_error():
    session = MagicMock()
    factory = MagicMock(return_value=session)
    uow = SqlAlchemyUnitOfWork(factory)

    with pytest.raises(PersistenceError) as exc_info:
        with uow:
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    assert not isinstance(exc_info.value, IntegrityViolationError)
    session.rollback.assert_called_once()
    session.close.assert_called_once()


def test_failed_rollback_still_closes_session():
    session = MagicMock()
    session.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("gone"))
    uow = SqlAlchemyUnitOfWork(MagicMock(return_value=session))

    with pytest.raises(PersistenceError):
        with uow:
            pass

    session.close.assert_called_once()


def test_translate_error():
    integrity = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    operational = OperationalError("SELECT", {}, Exception("timeout"))

    assert isinstance(translate_error(integrity), IntegrityViolationError)
    assert type(translate_error(operational)) is PersistenceError
