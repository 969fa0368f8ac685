"""
Per-user task routes.

The ``username`` path segment scopes listing and creation. Update and delete
address tasks by id alone; the segment is accepted but not compared with the
task's owner.
"""

from fastapi import APIRouter, Depends

from taskboard.dependencies import get_task_service
from taskboard.schemas import ErrorResponse, OkResponse, TaskFields, TaskResponse
from taskboard.services import TaskService
from taskboard.utils.logger import setup_logger

logger = setup_logger("api.tasks")

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("/{username}", response_model=list[TaskResponse])
async def list_tasks(
    username: str,
    task_service: TaskService = Depends(get_task_service),
):
    tasks = await task_service.list_tasks(username)
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post("/{username}", response_model=TaskResponse)
async def create_task(
    username: str,
    task_data: TaskFields | None = None,
    task_service: TaskService = Depends(get_task_service),
):
    """Create a task owned by ``username``; a username in the body is overridden."""
    fields = task_data.model_dump(exclude_unset=True) if task_data else {}
    task = await task_service.create_task(username, fields)
    return TaskResponse.model_validate(task)


@router.put(
    "/{username}/{task_id}",
    response_model=TaskResponse | None,
    responses={500: {"model": ErrorResponse}},
)
async def update_task(
    username: str,
    task_id: str,
    task_data: TaskFields | None = None,
    task_service: TaskService = Depends(get_task_service),
):
    """Overwrite the fields present in the body. Responds ``null`` for an unknown id."""
    fields = task_data.model_dump(exclude_unset=True) if task_data else {}
    logger.debug(f"Update of task {task_id} requested under '{username}'")
    task = await task_service.update_task(task_id, fields)
    return TaskResponse.model_validate(task) if task else None


@router.delete(
    "/{username}/{task_id}",
    response_model=OkResponse,
    responses={500: {"model": ErrorResponse}},
)
async def delete_task(
    username: str,
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
):
    logger.debug(f"Delete of task {task_id} requested under '{username}'")
    await task_service.delete_task(task_id)
    return OkResponse()
