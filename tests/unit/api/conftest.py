"""
Common fixtures for API unit tests.

Provides shared test utilities:
- Task payloads in the SPA's camelCase format
- A helper creating tasks through the API
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def task_payload() -> dict:
    """Valid POST /api/tasks body."""
    return {
        "title": "Buy milk",
        "description": "2%",
        "dueDate": "2025-03-01",
        "status": "Pending",
        "remarks": "urgent",
    }


@pytest.fixture
def create_task(
    client: TestClient, auth_headers: dict[str, str], task_payload: dict
) -> Callable[..., dict]:
    """
    Create a task through the API and return the response body.

    Keyword arguments override fields of task_payload.
    """

    def _create(headers: dict[str, str] | None = None, **overrides) -> dict:
        body = {**task_payload, **overrides}
        response = client.post("/api/tasks", json=body, headers=headers or auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
