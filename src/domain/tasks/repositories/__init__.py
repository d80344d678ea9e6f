"""
Task Domain Repository Interfaces.

Available Interfaces:
    - TaskRepositoryProtocol: Task persistence and read-model contract
"""

from src.domain.tasks.repositories.task_repository import TaskRepositoryProtocol

__all__ = ["TaskRepositoryProtocol"]
