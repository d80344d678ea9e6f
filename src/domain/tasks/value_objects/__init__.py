"""
Task Domain Value Objects.

Available Value Objects:
    - TaskStatus: Well-known workflow statuses
    - TaskDetails: Task read model with denormalized user names
    - TaskSearchCriteria: Search filter/order/paging options
    - TaskSortField: Ordering columns for search
"""

from src.domain.tasks.value_objects.task_details import TaskDetails
from src.domain.tasks.value_objects.task_search_criteria import (
    TaskSearchCriteria,
    TaskSortField,
)
from src.domain.tasks.value_objects.task_status import TaskStatus

__all__ = [
    "TaskStatus",
    "TaskDetails",
    "TaskSearchCriteria",
    "TaskSortField",
]
