"""
TaskStatus Value Object.

Well-known workflow states of a task. The persistence layer stores status as
an open string, so values outside this enum are accepted and round-trip
unchanged; the enum exists for clients, defaults and documentation.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """
    Well-known task statuses.

    Attributes:
        PENDING: Task created, work not started
        IN_PROGRESS: Work on the task has started
        COMPLETED: Task is done

    Usage:
        >>> TaskStatus.PENDING.value
        'Pending'
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
