"""
Task Entity.

Core domain entity representing a unit of work tracked by the application.
This entity has identity (UUID) and lifecycle (create -> update* -> delete).

Ownership stamping is part of the entity: every mutation records who made it
and when, so services cannot forget to refresh the audit fields.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Optional
from uuid import UUID, uuid4

from src.domain.shared.clock import utc_now
from src.domain.shared.exceptions import DomainValidationError


@dataclass
class Task:
    """
    Mutable entity representing a task with audit tracking.

    Attributes:
        title: Short task title (required, non-empty)
        description: Free-text description (required, non-empty)
        status: Workflow status, open string (required, non-empty)
        remarks: Free-text remarks (required, non-empty)
        created_by: Id of the user who created the task
        updated_by: Id of the user who last modified the task
        due_date: Optional calendar due date
        id: Unique identifier (UUID4, auto-generated)
        created_on: Creation timestamp (aware UTC)
        updated_on: Last modification timestamp (aware UTC, >= created_on)

    Invariants:
        - updated_on >= created_on
        - On creation created_by == updated_by and created_on == updated_on

    Examples:
        >>> task = Task.create(
        ...     title="Buy milk",
        ...     description="2%",
        ...     status="Pending",
        ...     remarks="urgent",
        ...     created_by=user_id,
        ... )
        >>> task.created_by == task.updated_by
        True
        >>> task.apply_changes({"status": "Completed"}, updated_by=other_user_id)
        >>> task.status
        'Completed'
    """

    title: str
    description: str
    status: str
    remarks: str
    created_by: UUID
    updated_by: UUID
    due_date: Optional[date] = None

    # Identity and timestamps (auto-generated)
    id: UUID = field(default_factory=uuid4)
    created_on: datetime = field(default_factory=utc_now)
    updated_on: Optional[datetime] = None

    # Fields a caller may overwrite through an update
    MUTABLE_FIELDS = ("title", "description", "due_date", "status", "remarks")

    # Fields that must hold non-blank text
    REQUIRED_TEXT_FIELDS = ("title", "description", "status", "remarks")

    def __post_init__(self) -> None:
        """
        Validate and normalize entity after initialization.

        Raises:
            DomainValidationError: If any required text field is blank
        """
        if self.updated_on is None:
            self.updated_on = self.created_on

        self.validate_fields(
            title=self.title,
            description=self.description,
            status=self.status,
            remarks=self.remarks,
        )
        for name in self.REQUIRED_TEXT_FIELDS:
            setattr(self, name, getattr(self, name).strip())

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        status: str,
        remarks: str,
        created_by: UUID,
        due_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> "Task":
        """
        Factory method for a brand new task owned by `created_by`.

        Sets created_by == updated_by and created_on == updated_on.

        Args:
            title: Task title
            description: Task description
            status: Workflow status
            remarks: Remarks
            created_by: Id of the calling user
            due_date: Optional due date
            now: Creation time (defaults to utc_now())

        Returns:
            New Task entity

        Raises:
            DomainValidationError: If required fields are blank
        """
        timestamp = now or utc_now()
        return cls(
            title=title,
            description=description,
            status=status,
            remarks=remarks,
            due_date=due_date,
            created_by=created_by,
            updated_by=created_by,
            created_on=timestamp,
            updated_on=timestamp,
        )

    @classmethod
    def validate_fields(cls, **values: Any) -> None:
        """
        Validate required text fields, collecting every error.

        Only the keyword arguments given are checked, so this serves both
        full creation and partial updates.

        Args:
            **values: Field name -> value pairs

        Raises:
            DomainValidationError: With one entry per invalid field
        """
        errors: list[str] = []
        for name in cls.REQUIRED_TEXT_FIELDS:
            if name not in values:
                continue
            value = values[name]
            if not isinstance(value, str) or not value.strip():
                errors.append(f"{name} must not be empty")

        if errors:
            raise DomainValidationError("Task validation failed", errors=errors)

    def apply_changes(
        self,
        changes: dict[str, Any],
        updated_by: UUID,
        now: Optional[datetime] = None,
    ) -> None:
        """
        Overwrite mutable fields and stamp the modification.

        Fields absent from `changes` keep their current value. `due_date`
        may be set to None explicitly to clear it.

        The new updated_on is strictly later than the previous one, even if
        the clock has not advanced (same-microsecond updates).

        Args:
            changes: Field name -> new value (subset of MUTABLE_FIELDS)
            updated_by: Id of the calling user
            now: Modification time (defaults to utc_now())

        Raises:
            DomainValidationError: If an unknown field is given or a required
                text field would become blank
        """
        unknown = sorted(set(changes) - set(self.MUTABLE_FIELDS))
        if unknown:
            raise DomainValidationError(
                "Task validation failed",
                errors=[f"{name} cannot be modified" for name in unknown],
            )

        self.validate_fields(
            **{k: v for k, v in changes.items() if k in self.REQUIRED_TEXT_FIELDS}
        )

        for name, value in changes.items():
            if name in self.REQUIRED_TEXT_FIELDS:
                value = value.strip()
            setattr(self, name, value)

        timestamp = now or utc_now()
        if timestamp <= self.updated_on:
            timestamp = self.updated_on + timedelta(microseconds=1)

        self.updated_by = updated_by
        self.updated_on = timestamp
