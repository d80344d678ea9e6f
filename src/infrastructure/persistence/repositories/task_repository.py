"""
Task Repository Implementation

SQLAlchemy implementation of TaskRepositoryProtocol.

Responsibility:
    - Task CRUD (inherited from SqlAlchemyRepository)
    - Read-side join with the users table for creator/updater names
    - Substring search with status filter, ordering and paging

Search Strategy:
    - Pattern '%<text>%' with LIKE wildcards in <text> escaped, so '%' and
      '_' typed by the user match literally
    - ILIKE against title OR description OR remarks OR status
      (case-insensitive on every backend)
    - Status filter is an exact match ANDed with the text filter
    - Ordering column + id as tiebreaker for stable paging
    - Tasks without a due date sort last when ordering by due date
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.orm import aliased

from src.domain.tasks.entities.task import Task
from src.domain.tasks.value_objects.task_details import TaskDetails
from src.domain.tasks.value_objects.task_search_criteria import (
    TaskSearchCriteria,
    TaskSortField,
)
from src.infrastructure.persistence.database.models import TaskModel, UserModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)

LIKE_ESCAPE = "\\"

_SORT_COLUMNS = {
    TaskSortField.CREATED_ON: TaskModel.created_on,
    TaskSortField.UPDATED_ON: TaskModel.updated_on,
    TaskSortField.DUE_DATE: TaskModel.due_date,
    TaskSortField.TITLE: TaskModel.title,
    TaskSortField.STATUS: TaskModel.status,
}


def escape_like(text: str) -> str:
    """
    Escape LIKE wildcards so `text` matches literally.

    Backslash, '%' and '_' are each prefixed with LIKE_ESCAPE.
    """
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


class SqlAlchemyTaskRepository(SqlAlchemyRepository[Task, TaskModel]):
    """
    Tasks table access.

    Examples:
        >>> repo = SqlAlchemyTaskRepository(session)
        >>> criteria = TaskSearchCriteria(text="milk", limit=10)
        >>> page = repo.search(criteria)
        >>> total = repo.count(criteria)
    """

    entity_type = Task
    model_type = TaskModel

    def _details_query(self) -> Select[Any]:
        creator = aliased(UserModel, name="creator")
        updater = aliased(UserModel, name="updater")
        return (
            self.query()
            .add_columns(
                creator.name.label("created_by_name"),
                updater.name.label("updated_by_name"),
            )
            .join(creator, TaskModel.created_by == creator.id)
            .join(updater, TaskModel.updated_by == updater.id)
        )

    def _to_details(self, row: Any) -> TaskDetails:
        task_row, created_by_name, updated_by_name = row
        return TaskDetails.from_task(
            self._to_entity(task_row),
            created_by_name=created_by_name,
            updated_by_name=updated_by_name,
        )

    @staticmethod
    def _filters(criteria: TaskSearchCriteria) -> list[ColumnElement[bool]]:
        filters: list[ColumnElement[bool]] = []

        if criteria.has_text:
            pattern = f"%{escape_like(criteria.text)}%"  # type: ignore[union-attr]
            filters.append(
                or_(
                    TaskModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    TaskModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                    TaskModel.remarks.ilike(pattern, escape=LIKE_ESCAPE),
                    TaskModel.status.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        if criteria.status:
            filters.append(TaskModel.status == criteria.status)

        return filters

    @staticmethod
    def _ordering(criteria: TaskSearchCriteria) -> list[ColumnElement[Any]]:
        column = _SORT_COLUMNS[criteria.sort_by]
        ordering: list[ColumnElement[Any]] = []

        if criteria.sort_by is TaskSortField.DUE_DATE:
            ordering.append(TaskModel.due_date.is_(None).asc())

        if criteria.descending:
            ordering.extend([column.desc(), TaskModel.id.desc()])
        else:
            ordering.extend([column.asc(), TaskModel.id.asc()])
        return ordering

    # ========================================================================
    # READ SIDE
    # ========================================================================

    def get_details(self, task_id: UUID) -> Optional[TaskDetails]:
        row = self.session.execute(
            self._details_query().where(TaskModel.id == task_id)
        ).first()
        if row is None:
            return None
        return self._to_details(row)

    def search(self, criteria: TaskSearchCriteria) -> list[TaskDetails]:
        stmt = (
            self._details_query()
            .where(*self._filters(criteria))
            .order_by(*self._ordering(criteria))
            .offset(criteria.offset)
            .limit(criteria.limit)
        )
        return [self._to_details(row) for row in self.session.execute(stmt)]

    def count(self, criteria: TaskSearchCriteria) -> int:
        stmt = (
            select(func.count())
            .select_from(TaskModel)
            .where(*self._filters(criteria))
        )
        return self.session.scalar(stmt) or 0
