"""
API Router for Tasks

Responsibility:
    HTTP interface for task CRUD and search.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (TaskService)
    - Reads are public; create/update/delete require a bearer token
    - Endpoints are plain `def`: FastAPI runs them on its threadpool,
      one request per worker thread, each with its own unit of work

Contains:
    - GET    /tasks            - Search tasks (X-Total-Count header)
    - GET    /tasks/{task_id}  - Get one task
    - POST   /tasks            - Create task
    - PUT    /tasks/{task_id}  - Update supplied fields
    - DELETE /tasks/{task_id}  - Delete task

Does NOT contain:
    - Business logic (delegated to TaskService / Task entity)
    - Error-to-status mapping (global handlers in main.py)
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response, status

from src.api.dependencies import get_current_caller, get_task_service
from src.api.schemas.common import ErrorResponse
from src.api.schemas.tasks import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from src.application.models import SortDirection
from src.application.queries.search_tasks import MAX_PAGE, SearchTasksQuery
from src.application.services.task_service import TaskService
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.tasks.value_objects.task_search_criteria import TaskSortField

logger = logging.getLogger(__name__)

TOTAL_COUNT_HEADER = "X-Total-Count"


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid input"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)

_AUTH_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Unauthorized - Missing or invalid token"},
}
_NOT_FOUND_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Not Found - Unknown task id"},
}


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="Search tasks",
    description=(
        "Case-insensitive substring search over title, description, remarks "
        "and status. The total number of matches is returned in the "
        f"{TOTAL_COUNT_HEADER} header."
    ),
)
def list_tasks(
    response: Response,
    query: Optional[str] = Query(default=None, description="Substring to search for"),
    status_filter: Optional[str] = Query(
        default=None, alias="status", description="Exact status filter"
    ),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    page_size: int = Query(default=20, ge=1, le=100, alias="pageSize"),
    sort_by: TaskSortField = Query(default=TaskSortField.CREATED_ON, alias="sortBy"),
    sort_direction: SortDirection = Query(
        default=SortDirection.DESC, alias="sortDirection"
    ),
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """
    Search tasks.

    Examples:
        >>> curl "http://localhost:8000/api/tasks?query=milk&page=1&pageSize=10"
        [{"id": "...", "title": "Buy milk", "status": "Pending", ...}]
    """
    result = service.search(
        SearchTasksQuery(
            query=query,
            status=status_filter,
            page=page,
            page_size=page_size,
            sort_by=sort_by,
            sort_direction=sort_direction,
        )
    )
    response.headers[TOTAL_COUNT_HEADER] = str(result.total)
    return [TaskResponse.model_validate(item) for item in result.items]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task",
    responses=_NOT_FOUND_RESPONSES,
)
def get_task(
    task_id: UUID = Path(..., description="Task id"),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return TaskResponse.model_validate(service.get_by_id(task_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponse,
    summary="Create a task",
    responses=_AUTH_RESPONSES,
)
def create_task(
    request: TaskCreateRequest,
    caller: CallerIdentity = Depends(get_current_caller),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Create a task owned by the caller.

    createdBy and updatedBy are both set to the caller; createdOn and
    updatedOn are both set to the current time.
    """
    details = service.create(request.to_command(), caller)
    return TaskResponse.model_validate(details)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
    responses={**_AUTH_RESPONSES, **_NOT_FOUND_RESPONSES},
)
def update_task(
    request: TaskUpdateRequest,
    task_id: UUID = Path(..., description="Task id"),
    caller: CallerIdentity = Depends(get_current_caller),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """
    Overwrite the fields present in the body.

    Omitted fields keep their value. updatedBy becomes the caller.
    """
    details = service.update(task_id, request.to_command(), caller)
    return TaskResponse.model_validate(details)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
    responses={**_AUTH_RESPONSES, **_NOT_FOUND_RESPONSES},
)
def delete_task(
    task_id: UUID = Path(..., description="Task id"),
    caller: CallerIdentity = Depends(get_current_caller),
    service: TaskService = Depends(get_task_service),
) -> Response:
    service.delete(task_id)
    logger.info(f"Task {task_id} deleted by user {caller.user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
