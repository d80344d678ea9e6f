"""
Repository Implementations Module

Concrete implementations of Domain repository interfaces.

Exports:
    - SqlAlchemyRepository: Generic dataclass <-> ORM repository
    - SqlAlchemyUserRepository: Users
    - SqlAlchemyTaskRepository: Tasks, task details and search
"""

from .base_repository import SqlAlchemyRepository
from .task_repository import SqlAlchemyTaskRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTaskRepository",
]
