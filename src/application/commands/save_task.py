"""
Task Write Commands

Command objects carrying the data of task create/update requests from the
API Layer to TaskService.

Responsibility:
    - Hold request data in a framework-neutral form
    - Validate business rules, collecting all errors at once

Architecture Notes:
    - Part of Application Layer (CQRS write side)
    - Pydantic handles types/shape; validate_business_rules() handles the
      rules the Task entity enforces (non-blank text fields)
    - UpdateTaskCommand tracks which fields were actually supplied: omitted
      fields keep their stored value, an explicit null due_date clears it
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.domain.shared.exceptions import DomainValidationError
from src.domain.tasks.entities.task import Task
from src.domain.tasks.value_objects.task_status import TaskStatus


class CreateTaskCommand(BaseModel):
    """
    Command containing all data needed to create a task.

    Attributes:
        title: Task title (required, non-blank)
        description: Task description (required, non-blank)
        status: Workflow status (required, non-blank, open string)
        remarks: Remarks (required, non-blank)
        due_date: Optional due date

    Examples:
        >>> command = CreateTaskCommand(
        ...     title="Buy milk",
        ...     description="2%",
        ...     status="Pending",
        ...     remarks="urgent",
        ... )
        >>> command.validate_business_rules()  # Raises if invalid
    """

    title: str = Field(description="Task title")
    description: str = Field(description="Task description")
    status: str = Field(
        description="Workflow status (Pending, InProgress, Completed or custom)",
        examples=[status.value for status in TaskStatus],
    )
    remarks: str = Field(description="Remarks")
    due_date: Optional[date] = Field(default=None, description="Optional due date")

    def validate_business_rules(self) -> None:
        """
        Validate required fields, collecting every error.

        Raises:
            DomainValidationError: If any required text field is blank
        """
        Task.validate_fields(
            title=self.title,
            description=self.description,
            status=self.status,
            remarks=self.remarks,
        )


class UpdateTaskCommand(BaseModel):
    """
    Command containing the fields of a task update.

    Only fields explicitly set when the command is built are applied.

    Examples:
        >>> command = UpdateTaskCommand(status="Completed")
        >>> command.changes()
        {'status': 'Completed'}

        >>> UpdateTaskCommand(due_date=None).changes()
        {'due_date': None}
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    due_date: Optional[date] = None

    def changes(self) -> dict[str, Any]:
        """
        Return only the fields supplied by the caller.

        Returns:
            Field name -> new value
        """
        return self.model_dump(exclude_unset=True)

    def validate_business_rules(self) -> None:
        """
        Validate supplied fields, collecting every error.

        Business Rules:
            1. At least one field must be supplied
            2. Supplied title/description/status/remarks must be non-blank
               (null is not allowed for them; only due_date can be cleared)

        Raises:
            DomainValidationError: If any rule is violated
        """
        changes = self.changes()
        if not changes:
            raise DomainValidationError(
                "Task validation failed",
                errors=["at least one field must be provided"],
            )

        Task.validate_fields(
            **{k: v for k, v in changes.items() if k in Task.REQUIRED_TEXT_FIELDS}
        )
