"""
SQLAlchemy Unit of Work

Implements UnitOfWorkProtocol on top of a SQLAlchemy session factory.

Responsibility:
    - Open a fresh session per `with` block and bind repositories to it
    - Commit staged writes atomically
    - Roll back and close the session when the block ends
    - Translate SQLAlchemy errors into PersistenceError/IntegrityViolationError

Architecture Notes:
    - Infrastructure Layer (implements Application port)
    - One instance may be entered many times sequentially; every entry
      gets its own session, so nothing leaks between service calls
    - Not shared between threads: the API builds one per request
"""

import logging
from types import TracebackType
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.application.ports.unit_of_work import (
    IntegrityViolationError,
    PersistenceError,
)
from src.infrastructure.persistence.repositories.task_repository import (
    SqlAlchemyTaskRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    SqlAlchemyUserRepository,
)

logger = logging.getLogger(__name__)


def translate_error(error: SQLAlchemyError) -> PersistenceError:
    """
    Map a SQLAlchemy exception to the Application persistence errors.

    Args:
        error: Exception raised by SQLAlchemy or the DB driver

    Returns:
        IntegrityViolationError for constraint violations, PersistenceError otherwise
    """
    if isinstance(error, IntegrityError):
        return IntegrityViolationError(f"Constraint violation: {error.orig}")
    return PersistenceError(f"Database error: {error}")


class SqlAlchemyUnitOfWork:
    """
    Transaction boundary for one service call.

    Attributes:
        session_factory: sessionmaker bound to the engine
        session: Session of the active block (None outside `with`)
        users: User repository of the active block
        tasks: Task repository of the active block

    Examples:
        >>> uow = SqlAlchemyUnitOfWork(get_session_factory())
        >>> with uow:
        ...     uow.users.add(user)
        ...     uow.commit()
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.session: Optional[Session] = None

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        if self.session is not None:
            raise RuntimeError("Unit of work is already active")

        self.session = self.session_factory()
        self.users = SqlAlchemyUserRepository(self.session)
        self.tasks = SqlAlchemyTaskRepository(self.session)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        session = self.session
        self.session = None
        if session is None:
            return

        try:
            # Discards anything staged but not committed
            session.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")
            if exc_value is None:
                raise translate_error(e) from e
        finally:
            session.close()

        if isinstance(exc_value, SQLAlchemyError):
            logger.error(f"Unit of work aborted by database error: {exc_value}")
            raise translate_error(exc_value) from exc_value

    def _active_session(self) -> Session:
        if self.session is None:
            raise RuntimeError("Unit of work is not active")
        return self.session

    def commit(self) -> None:
        """
        Flush and commit all staged changes.

        Raises:
            IntegrityViolationError: If a constraint rejects the write
            PersistenceError: If the store fails
        """
        session = self._active_session()
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise translate_error(e) from e

    def rollback(self) -> None:
        self._active_session().rollback()
