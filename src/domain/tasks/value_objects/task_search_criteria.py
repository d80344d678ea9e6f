"""
TaskSearchCriteria Value Object.

Filter, ordering and paging options understood by TaskRepositoryProtocol.search().

Matching Rules:
    - text: case-insensitive substring, unanchored on both sides, tested
      against title OR description OR remarks OR status
    - status: exact match, applied on top of the text filter
    - No ranking: this is literal substring matching, not full-text search.
      Every query scans the table (O(n)); no index can serve '%text%'.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskSortField(str, Enum):
    """Columns a search result can be ordered by (values match the API)."""

    CREATED_ON = "createdOn"
    UPDATED_ON = "updatedOn"
    DUE_DATE = "dueDate"
    TITLE = "title"
    STATUS = "status"


@dataclass(frozen=True)
class TaskSearchCriteria:
    """
    Immutable search options.

    Attributes:
        text: Substring to look for (None or blank = no text filter)
        status: Exact status filter (None = any status)
        sort_by: Ordering column
        descending: Order direction
        offset: Number of rows to skip
        limit: Maximum number of rows to return

    Examples:
        >>> TaskSearchCriteria(text="milk", status="Pending", offset=0, limit=20)
    """

    text: Optional[str] = None
    status: Optional[str] = None
    sort_by: TaskSortField = TaskSortField.CREATED_ON
    descending: bool = True
    offset: int = 0
    limit: int = 20

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())
