"""
Task list operations for users and administrators.

Each operation is a single store call. Task ids are not checked against the
``username`` path segment: any caller that knows an id can update or delete
that task.
"""

import uuid
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from taskboard.db_handlers import TaskDBHandler
from taskboard.errors import InternalError
from taskboard.models import Task
from taskboard.utils.logger import setup_logger

logger = setup_logger("task_service")


def _parse_task_id(task_id: str, failure_message: str) -> uuid.UUID:
    try:
        return uuid.UUID(task_id)
    except ValueError as e:
        logger.warning(f"Malformed task id '{task_id}'")
        raise InternalError(failure_message) from e


class TaskService:
    def __init__(self, task_db_handler: TaskDBHandler):
        self.task_db_handler = task_db_handler

    async def list_tasks(self, username: str) -> list[Task]:
        try:
            return await self.task_db_handler.get_tasks_for_user(username)
        except SQLAlchemyError as e:
            logger.error(f"Listing tasks for '{username}' failed: {e}", exc_info=True)
            raise InternalError("List failed") from e

    async def create_task(self, username: str, fields: dict[str, Any]) -> Task:
        """Store a task built from ``fields``, owned by ``username`` whatever the body says."""
        task_dict = {**fields, "username": username}
        try:
            task = await self.task_db_handler.create(task_dict)
        except SQLAlchemyError as e:
            logger.error(f"Creating task for '{username}' failed: {e}", exc_info=True)
            raise InternalError("Create failed") from e
        logger.info(f"Created task {task.id} for '{username}'")
        return task

    async def update_task(self, task_id: str, fields: dict[str, Any]) -> Task | None:
        """Overwrite the given fields; fields absent from ``fields`` keep their value.

        Returns None when no task has this id.
        """
        task_uuid = _parse_task_id(task_id, "Update failed")
        try:
            return await self.task_db_handler.update_task(task_uuid, fields)
        except SQLAlchemyError as e:
            logger.error(f"Updating task {task_id} failed: {e}", exc_info=True)
            raise InternalError("Update failed") from e

    async def delete_task(self, task_id: str) -> None:
        """Delete a task. Deleting an id that does not exist is not an error."""
        task_uuid = _parse_task_id(task_id, "Delete failed")
        try:
            deleted = await self.task_db_handler.delete_task(task_uuid)
        except SQLAlchemyError as e:
            logger.error(f"Deleting task {task_id} failed: {e}", exc_info=True)
            raise InternalError("Delete failed") from e
        if deleted:
            logger.info(f"Deleted task {task_id}")

    async def admin_list_tasks(self) -> list[Task]:
        try:
            return await self.task_db_handler.get_all_tasks_by_date()
        except SQLAlchemyError as e:
            logger.error(f"Admin task listing failed: {e}", exc_info=True)
            raise InternalError("List failed") from e

    async def admin_update_task(self, task_id: str, fields: dict[str, Any]) -> Task | None:
        return await self.update_task(task_id, fields)

    async def admin_delete_task(self, task_id: str) -> None:
        await self.delete_task(task_id)
