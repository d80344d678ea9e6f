"""
Task API Schemas

HTTP request/response models for the tasks router.
Converted to/from Application Layer commands and TaskDetails.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from src.api.schemas.common import CamelModel
from src.application.commands.save_task import CreateTaskCommand, UpdateTaskCommand
from src.domain.tasks.value_objects.task_status import TaskStatus

_STATUS_EXAMPLES = [status.value for status in TaskStatus]


class TaskCreateRequest(CamelModel):
    """
    Request body for POST /api/tasks.

    Blank strings pass this schema and are rejected by the command's
    business rules, so every blank field is reported at once.
    """

    title: str = Field(max_length=200, description="Task title")
    description: str = Field(description="Task description")
    due_date: Optional[date] = Field(default=None, description="Optional due date")
    status: str = Field(max_length=50, examples=_STATUS_EXAMPLES)
    remarks: str = Field(description="Remarks")

    def to_command(self) -> CreateTaskCommand:
        return CreateTaskCommand(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            status=self.status,
            remarks=self.remarks,
        )


class TaskUpdateRequest(CamelModel):
    """
    Request body for PUT /api/tasks/{id}.

    Only the fields present in the body are changed; "dueDate": null clears
    the due date.
    """

    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[str] = Field(default=None, max_length=50, examples=_STATUS_EXAMPLES)
    remarks: Optional[str] = None

    def to_command(self) -> UpdateTaskCommand:
        return UpdateTaskCommand(**self.model_dump(exclude_unset=True))


class TaskResponse(CamelModel):
    """
    Task as returned by every tasks endpoint.

    Built from TaskDetails (from_attributes).
    """

    id: UUID
    title: str
    description: str
    due_date: Optional[date] = None
    status: str
    remarks: str
    created_on: datetime
    updated_on: datetime
    created_by: UUID
    created_by_name: str
    updated_by: UUID
    updated_by_name: str
