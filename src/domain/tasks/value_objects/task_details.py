"""
TaskDetails Value Object.

Read model of a task joined with the names of its creator and last updater.
Built by the repository with an explicit read-side join, never stored.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from src.domain.tasks.entities.task import Task


@dataclass(frozen=True)
class TaskDetails:
    """
    Immutable snapshot of a task with denormalized user names.

    Attributes:
        id: Task id
        title: Task title
        description: Task description
        due_date: Optional due date
        status: Workflow status
        remarks: Remarks
        created_on: Creation timestamp
        updated_on: Last modification timestamp
        created_by: Creator user id
        created_by_name: Creator display name
        updated_by: Last updater user id
        updated_by_name: Last updater display name
    """

    id: UUID
    title: str
    description: str
    due_date: Optional[date]
    status: str
    remarks: str
    created_on: datetime
    updated_on: datetime
    created_by: UUID
    created_by_name: str
    updated_by: UUID
    updated_by_name: str

    @classmethod
    def from_task(
        cls, task: Task, created_by_name: str, updated_by_name: str
    ) -> "TaskDetails":
        """
        Combine a Task entity with the joined user names.

        Examples:
            >>> details = TaskDetails.from_task(task, "Alice", "Bob")
            >>> details.updated_by_name
            'Bob'
        """
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            status=task.status,
            remarks=task.remarks,
            created_on=task.created_on,
            updated_on=task.updated_on,
            created_by=task.created_by,
            created_by_name=created_by_name,
            updated_by=task.updated_by,
            updated_by_name=updated_by_name,
        )
