"""
Tests for CreateTaskCommand and UpdateTaskCommand.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from src.application.commands.save_task import CreateTaskCommand, UpdateTaskCommand
from src.domain.shared.exceptions import DomainValidationError


# ============================================================================
# TESTS - CreateTaskCommand
# ============================================================================


def test_create_command_valid():
    command = CreateTaskCommand(
        title="Buy milk",
        description="2%",
        status="Pending",
        remarks="urgent",
        due_date="2025-03-01",
    )

    command.validate_business_rules()

    assert command.due_date == date(2025, 3, 1)


def test_create_command_requires_status():
    with pytest.raises(ValidationError):
        CreateTaskCommand(title="t", description="d", remarks="r")


def test_create_command_reports_every_blank_field():
    command = CreateTaskCommand(title=" ", description="", status="", remarks="ok")

    with pytest.raises(DomainValidationError) as exc_info:
        command.validate_business_rules()

    assert len(exc_info.value.errors) == 3
    assert "Task validation failed" in str(exc_info.value)


# ============================================================================
# TESTS - UpdateTaskCommand
# ============================================================================


def test_update_command_changes_contains_only_set_fields():
    command = UpdateTaskCommand(status="Completed")

    assert command.changes() == {"status": "Completed"}


def test_update_command_explicit_null_due_date_is_a_change():
    command = UpdateTaskCommand(due_date=None)

    assert command.changes() == {"due_date": None}
    command.validate_business_rules()


def test_update_command_requires_at_least_one_field():
    with pytest.raises(DomainValidationError, match="at least one field"):
        UpdateTaskCommand().validate_business_rules()


def test_update_command_rejects_blank_supplied_field():
    command = UpdateTaskCommand(title="", remarks="fine")

    with pytest.raises(DomainValidationError, match="title must not be empty"):
        command.validate_business_rules()


def test_update_command_rejects_null_title():
    command = UpdateTaskCommand(title=None)

    with pytest.raises(DomainValidationError, match="title must not be empty"):
        command.validate_business_rules()
