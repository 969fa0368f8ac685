"""
Admin sign-in and the admin view over every user's tasks.

Mounted only when ``ADMIN_ENABLED`` is set. The task routes themselves carry
no admin check; ``POST /admin`` is the only place the flag is consulted.
"""

from fastapi import APIRouter, Depends

from taskboard.dependencies import get_auth_service, get_task_service
from taskboard.schemas import (
    ErrorResponse,
    OkResponse,
    TaskFields,
    TaskResponse,
    UsernameRequest,
)
from taskboard.services import AuthService, TaskService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "",
    response_model=OkResponse,
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def admin_signin(
    user_data: UsernameRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    await auth_service.admin_signin(user_data.username)
    return OkResponse()


@router.get("/tasks", response_model=list[TaskResponse])
async def admin_list_tasks(task_service: TaskService = Depends(get_task_service)):
    """Every task, ordered by ``date`` descending as plain text."""
    tasks = await task_service.admin_list_tasks()
    return [TaskResponse.model_validate(task) for task in tasks]


@router.put(
    "/tasks/{task_id}",
    response_model=TaskResponse | None,
    responses={500: {"model": ErrorResponse}},
)
async def admin_update_task(
    task_id: str,
    task_data: TaskFields | None = None,
    task_service: TaskService = Depends(get_task_service),
):
    fields = task_data.model_dump(exclude_unset=True) if task_data else {}
    task = await task_service.admin_update_task(task_id, fields)
    return TaskResponse.model_validate(task) if task else None


@router.delete(
    "/tasks/{task_id}",
    response_model=OkResponse,
    responses={500: {"model": ErrorResponse}},
)
async def admin_delete_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service),
):
    await task_service.admin_delete_task(task_id)
    return OkResponse()
