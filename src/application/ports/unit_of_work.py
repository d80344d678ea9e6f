"""
Unit of Work Port

Contract for grouping repository operations into one atomic transaction.

Responsibility:
    - Expose the repositories that take part in the transaction
    - Commit all staged writes at once, or roll them back
    - Define the persistence failures the Infrastructure Layer may raise

Architecture Notes:
    - Application Layer port, implemented by SqlAlchemyUnitOfWork
    - One service method == one unit of work == at most one commit
    - Leaving the `with` block without commit() discards staged writes
    - No retries at this layer; failures propagate to the caller
"""

from types import TracebackType
from typing import Optional, Protocol

from src.domain.identity.repositories.user_repository import UserRepositoryProtocol
from src.domain.tasks.repositories.task_repository import TaskRepositoryProtocol


class PersistenceError(Exception):
    """
    Raised when the underlying store fails (unreachable, timeout, driver error).

    Mapped to HTTP 500 by the API Layer; the message is logged, never sent
    to the client.
    """


class IntegrityViolationError(PersistenceError):
    """
    Raised when a commit is rejected by a database constraint
    (unique index, foreign key, not-null).
    """


class UnitOfWorkProtocol(Protocol):
    """
    Protocol for a transactional unit of work.

    Usage:
        >>> with unit_of_work as uow:
        ...     task = uow.tasks.get_by_id(task_id)
        ...     task.apply_changes(changes, updated_by=caller.user_id)
        ...     uow.tasks.update(task)
        ...     uow.commit()
    """

    users: UserRepositoryProtocol
    tasks: TaskRepositoryProtocol

    def __enter__(self) -> "UnitOfWorkProtocol":
        ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        ...

    def commit(self) -> None:
        """
        Write all staged changes atomically.

        Raises:
            IntegrityViolationError: If a constraint rejects the write
            PersistenceError: If the store fails
        """
        ...

    def rollback(self) -> None:
        """Discard all staged changes."""
        ...
