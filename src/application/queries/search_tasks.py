"""
SearchTasksQuery - CQRS Read Query

Query object for task substring search and its paged result.

Responsibility:
    - Query: Search text, status filter, ordering and paging
    - Result: One page of TaskDetails plus the total match count

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Query is a simple DTO converted to the domain TaskSearchCriteria
    - Executed by TaskService.search()
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.application.models import SortDirection
from src.domain.tasks.value_objects.task_details import TaskDetails
from src.domain.tasks.value_objects.task_search_criteria import (
    TaskSearchCriteria,
    TaskSortField,
)

# Upper bound for page numbers; keeps the row offset within a 64-bit INTEGER
MAX_PAGE = 1_000_000


class SearchTasksQuery(BaseModel):
    """
    Query object containing search options.

    Attributes:
        query: Case-insensitive substring matched against title, description,
            remarks and status (None/blank = all tasks)
        status: Exact status filter (None = any)
        page: 1-based page number
        page_size: Number of tasks per page (1-100)
        sort_by: Ordering column
        sort_direction: asc or desc

    Examples:
        >>> q = SearchTasksQuery(query="milk", status="Pending", page=2, page_size=10)
        >>> q.to_criteria().offset
        10
    """

    query: Optional[str] = Field(default=None, description="Substring to search for")
    status: Optional[str] = Field(default=None, description="Exact status filter")
    page: int = Field(
        default=1, ge=1, le=MAX_PAGE, description="1-based page number"
    )
    page_size: int = Field(
        default=20, ge=1, le=100, description="Number of tasks per page"
    )
    sort_by: TaskSortField = Field(
        default=TaskSortField.CREATED_ON, description="Ordering column"
    )
    sort_direction: SortDirection = Field(
        default=SortDirection.DESC, description="Ordering direction"
    )

    def to_criteria(self) -> TaskSearchCriteria:
        """
        Convert to the domain search criteria understood by repositories.

        Blank query/status strings are treated as "no filter". A non-blank
        query is matched verbatim, surrounding whitespace included.
        """
        text = self.query if self.query and self.query.strip() else None
        status = self.status.strip() if self.status else None
        return TaskSearchCriteria(
            text=text,
            status=status or None,
            sort_by=self.sort_by,
            descending=self.sort_direction == SortDirection.DESC,
            offset=(self.page - 1) * self.page_size,
            limit=self.page_size,
        )


class TaskSearchResult(BaseModel):
    """
    Result DTO returned by TaskService.search().

    Attributes:
        items: Tasks on the requested page
        total: Number of tasks matching the filters across all pages
        page: Requested page
        page_size: Requested page size
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[TaskDetails]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
