"""
Application Services

Responsibility:
    Use-case orchestration over the unit of work and security ports.

Contains:
    - TaskService: Task CRUD and search with ownership stamping
    - AuthService: Registration, login and token issuance

Does NOT contain:
    - Domain business rules (use Domain entities)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.auth_service import AuthService
from src.application.services.task_service import TaskService

__all__ = ["TaskService", "AuthService"]
