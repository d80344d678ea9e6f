"""
Tasks Subdomain Module

Business rules for task tracking: the Task entity with ownership stamping,
its read model, search criteria and the repository contract.

Exports:
    Entities:
        - Task

    Value Objects:
        - TaskStatus, TaskDetails, TaskSearchCriteria, TaskSortField

    Repository Interfaces:
        - TaskRepositoryProtocol

Usage:
    >>> from src.domain.tasks import Task, TaskDetails, TaskSearchCriteria
"""

from .entities import Task
from .repositories import TaskRepositoryProtocol
from .value_objects import TaskDetails, TaskSearchCriteria, TaskSortField, TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "TaskDetails",
    "TaskSearchCriteria",
    "TaskSortField",
    "TaskRepositoryProtocol",
]
