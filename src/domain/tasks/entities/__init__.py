"""
Task Domain Entities.

Entities have identity and lifecycle - they are mutable objects tracked by ID.

Available Entities:
    - Task: Core entity representing a tracked unit of work
"""

from src.domain.tasks.entities.task import Task

__all__ = ["Task"]
