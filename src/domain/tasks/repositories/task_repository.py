"""
TaskRepository Interface

Repository pattern interface for Task persistence and task read models.

Architecture Notes:
    - Dependency Inversion: Domain defines, Infrastructure implements
    - Write side works on Task entities (inherited CRUD contract)
    - Read side returns TaskDetails joined with creator/updater names
"""

from typing import Optional, Protocol
from uuid import UUID

from src.domain.shared.repository import RepositoryProtocol
from src.domain.tasks.entities.task import Task
from src.domain.tasks.value_objects.task_details import TaskDetails
from src.domain.tasks.value_objects.task_search_criteria import TaskSearchCriteria


class TaskRepositoryProtocol(RepositoryProtocol[Task], Protocol):
    """
    Protocol defining the contract for Task persistence.

    Read operations:
        - get_details(): One task joined with user names
        - search(): Page of tasks matching TaskSearchCriteria
        - count(): Total number of tasks matching the same criteria
    """

    def get_details(self, task_id: UUID) -> Optional[TaskDetails]:
        """
        Retrieve a task with denormalized creator/updater names.

        Args:
            task_id: Task id

        Returns:
            TaskDetails if found, None otherwise
        """
        ...

    def search(self, criteria: TaskSearchCriteria) -> list[TaskDetails]:
        """
        Retrieve one page of tasks matching the criteria.

        Args:
            criteria: Text/status filters, ordering and paging

        Returns:
            List of TaskDetails (empty if nothing matches)
        """
        ...

    def count(self, criteria: TaskSearchCriteria) -> int:
        """
        Count tasks matching the criteria filters (paging ignored).
        """
        ...
