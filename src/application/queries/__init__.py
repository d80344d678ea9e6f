"""
Application Queries (CQRS read side)

Contains:
    - SearchTasksQuery: Task substring search options
    - TaskSearchResult: Paged search result
"""

from src.application.queries.search_tasks import SearchTasksQuery, TaskSearchResult

__all__ = ["SearchTasksQuery", "TaskSearchResult"]
