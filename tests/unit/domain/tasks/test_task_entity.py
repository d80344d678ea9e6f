"""
Tests for Task entity.

Covers: creation/ownership stamping, required field validation,
apply_changes (partial update, due date clearing, strictly later updated_on).
"""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.domain.shared.exceptions import DomainValidationError
from src.domain.tasks.entities.task import Task

NOW = datetime(2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def make_task(**overrides) -> Task:
    values = {
        "title": "Buy milk",
        "description": "2%",
        "status": "Pending",
        "remarks": "urgent",
        "created_by": uuid4(),
        "now": NOW,
    }
    values.update(overrides)
    return Task.create(**values)


# ============================================================================
# TESTS - create()
# ============================================================================


def test_create_stamps_same_owner_and_timestamp():
    """created_by == updated_by and created_on == updated_on on creation."""
    user_id = uuid4()

    task = make_task(created_by=user_id)

    assert task.created_by == user_id
    assert task.updated_by == user_id
    assert task.created_on == NOW
    assert task.updated_on == NOW


def test_create_strips_text_fields():
    task = make_task(title="  Buy milk  ", remarks=" urgent\n")

    assert task.title == "Buy milk"
    assert task.remarks == "urgent"


def test_create_generates_unique_ids():
    assert make_task().id != make_task().id


def test_create_keeps_optional_due_date():
    task = make_task(due_date=date(2025, 2, 1))

    assert task.due_date == date(2025, 2, 1)


def test_create_accepts_custom_status():
    """Status is an open string, not a closed enum."""
    task = make_task(status="Blocked")

    assert task.status == "Blocked"


def test_create_collects_all_blank_field_errors():
    """Every blank required field is reported in a single error."""
    with pytest.raises(DomainValidationError) as exc_info:
        make_task(title="", description="   ", status="Pending", remarks="")

    errors = exc_info.value.errors
    assert errors == [
        "title must not be empty",
        "description must not be empty",
        "remarks must not be empty",
    ]


# ============================================================================
# TESTS - apply_changes()
# ============================================================================


def test_apply_changes_updates_only_supplied_fields():
    """Example: status update by a second user keeps the title."""
    creator, editor = uuid4(), uuid4()
    task = make_task(created_by=creator)

    task.apply_changes(
        {"status": "Completed"}, updated_by=editor, now=NOW + timedelta(minutes=5)
    )

    assert task.status == "Completed"
    assert task.title == "Buy milk"
    assert task.created_by == creator
    assert task.updated_by == editor
    assert task.created_on == NOW
    assert task.updated_on == NOW + timedelta(minutes=5)


def test_apply_changes_can_clear_due_date():
    task = make_task(due_date=date(2025, 2, 1))

    task.apply_changes({"due_date": None}, updated_by=uuid4())

    assert task.due_date is None


def test_apply_changes_forces_strictly_later_updated_on():
    """A clock that has not advanced still yields a later updated_on."""
    task = make_task()

    task.apply_changes({"remarks": "later"}, updated_by=uuid4(), now=NOW)

    assert task.updated_on > task.created_on
    assert task.updated_on == NOW + timedelta(microseconds=1)


def test_apply_changes_rejects_blank_values():
    task = make_task()

    with pytest.raises(DomainValidationError, match="title must not be empty"):
        task.apply_changes({"title": "  "}, updated_by=uuid4())

    assert task.title == "Buy milk"


def test_apply_changes_rejects_null_required_field():
    task = make_task()

    with pytest.raises(DomainValidationError, match="status must not be empty"):
        task.apply_changes({"status": None}, updated_by=uuid4())


def test_apply_changes_rejects_unknown_fields():
    task = make_task()

    with pytest.raises(DomainValidationError, match="created_by cannot be modified"):
        task.apply_changes({"created_by": uuid4()}, updated_by=uuid4())


def test_apply_changes_strips_text():
    task = make_task()

    task.apply_changes({"title": "  New title "}, updated_by=uuid4())

    assert task.title == "New title"
