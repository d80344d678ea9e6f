"""
Task Service

Responsibility:
    Orchestrates task CRUD and search over the unit of work.
    Stamps ownership (created_by/updated_by) with the caller identity.

Architecture Notes:
    - Part of Application Layer (Services)
    - Called by API Layer (tasks router)
    - One public method == one unit of work == at most one commit
    - No optimistic concurrency: concurrent updates of the same task are
      serialized by the database and the last commit wins

Contains:
    - TaskService: create, get_by_id, update, delete, search

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - SQL (delegated to Infrastructure repositories)
    - Field rules (enforced by the Task entity)
"""

import logging
from uuid import UUID

from src.application.commands.save_task import CreateTaskCommand, UpdateTaskCommand
from src.application.ports.unit_of_work import UnitOfWorkProtocol
from src.application.queries.search_tasks import SearchTasksQuery, TaskSearchResult
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import TaskNotFoundError
from src.domain.tasks.entities.task import Task
from src.domain.tasks.value_objects.task_details import TaskDetails

logger = logging.getLogger(__name__)


class TaskService:
    """
    Use cases for tasks.

    Process Flow (update):
        API Layer builds UpdateTaskCommand from request body
        → TaskService.update(task_id, command, caller)
        → command.validate_business_rules()
        → uow.tasks.get_by_id() (TaskNotFoundError if missing)
        → task.apply_changes() stamps updated_by/updated_on
        → uow.tasks.update(); uow.commit()
        → uow.tasks.get_details() joins creator/updater names
        → Return TaskDetails

    Attributes:
        unit_of_work: Unit of work opened once per method call (injected)

    Examples:
        >>> service = TaskService(unit_of_work=SqlAlchemyUnitOfWork(session_factory))
        >>> details = service.create(command, caller)
        >>> details.created_by == caller.user_id
        True
    """

    def __init__(self, unit_of_work: UnitOfWorkProtocol) -> None:
        self.unit_of_work = unit_of_work

    def create(self, command: CreateTaskCommand, caller: CallerIdentity) -> TaskDetails:
        """
        Create a task owned by the caller.

        Args:
            command: Task data
            caller: Authenticated caller (becomes creator and updater)

        Returns:
            Created task with denormalized user names

        Raises:
            DomainValidationError: If required fields are blank
            PersistenceError: If the store fails
        """
        command.validate_business_rules()

        with self.unit_of_work as uow:
            task = Task.create(
                title=command.title,
                description=command.description,
                status=command.status,
                remarks=command.remarks,
                due_date=command.due_date,
                created_by=caller.user_id,
            )
            uow.tasks.add(task)
            uow.commit()

            details = uow.tasks.get_details(task.id)

        if details is None:
            raise TaskNotFoundError(task.id)

        logger.info(f"Task {task.id} created by user {caller.user_id}")
        return details

    def get_by_id(self, task_id: UUID) -> TaskDetails:
        """
        Retrieve one task.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        with self.unit_of_work as uow:
            details = uow.tasks.get_details(task_id)

        if details is None:
            logger.warning(f"Task not found: {task_id}")
            raise TaskNotFoundError(task_id)

        return details

    def update(
        self,
        task_id: UUID,
        command: UpdateTaskCommand,
        caller: CallerIdentity,
    ) -> TaskDetails:
        """
        Overwrite the supplied fields of a task.

        created_on/created_by are never touched; updated_by becomes the
        caller and updated_on moves strictly forward.

        Args:
            task_id: Task to modify
            command: Supplied fields
            caller: Authenticated caller (becomes updater)

        Returns:
            Updated task with denormalized user names

        Raises:
            DomainValidationError: If the supplied fields are invalid
            TaskNotFoundError: If the task does not exist
            PersistenceError: If the store fails
        """
        command.validate_business_rules()

        with self.unit_of_work as uow:
            task = uow.tasks.get_by_id(task_id)
            if task is None:
                logger.warning(f"Update of unknown task {task_id}")
                raise TaskNotFoundError(task_id)

            task.apply_changes(command.changes(), updated_by=caller.user_id)
            uow.tasks.update(task)
            uow.commit()

            details = uow.tasks.get_details(task_id)

        if details is None:
            raise TaskNotFoundError(task_id)

        logger.info(f"Task {task_id} updated by user {caller.user_id}")
        return details

    def delete(self, task_id: UUID) -> None:
        """
        Permanently delete a task (no soft delete).

        Raises:
            TaskNotFoundError: If the task does not exist
            PersistenceError: If the store fails
        """
        with self.unit_of_work as uow:
            if not uow.tasks.remove(task_id):
                logger.warning(f"Delete of unknown task {task_id}")
                raise TaskNotFoundError(task_id)
            uow.commit()

        logger.info(f"Task {task_id} deleted")

    def search(self, query: SearchTasksQuery) -> TaskSearchResult:
        """
        Substring search with optional status filter, ordering and paging.

        A task matches when the query text occurs (case-insensitive,
        anywhere) in its title, description, remarks or status.

        Args:
            query: Search options

        Returns:
            TaskSearchResult with the requested page and the total count
        """
        criteria = query.to_criteria()

        with self.unit_of_work as uow:
            items = uow.tasks.search(criteria)
            total = uow.tasks.count(criteria)

        logger.debug(
            f"Task search text={criteria.text!r} status={criteria.status!r}: "
            f"{len(items)}/{total} tasks"
        )
        return TaskSearchResult(
            items=items,
            total=total,
            page=query.page,
            page_size=query.page_size,
        )
