from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.db_handlers.base import BaseDBHandler, check_local_db
from taskboard.models.task import Task
from taskboard.utils.logger import setup_logger

logger = setup_logger("task_db_handler")


def date_desc_order(dialect_name: str):
    """ORDER BY date DESC in byte order, undated tasks last.

    Postgres compares text with the database locale unless told otherwise, so
    the C collation is forced there. SQLite already compares bytes.
    """
    column = Task.date
    if dialect_name == "postgresql":
        column = column.collate("C")
    return column.desc().nulls_last()


class TaskDBHandler(BaseDBHandler[Task]):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(Task, session_factory)

    @check_local_db
    async def get_tasks_for_user(
        self, username: str, *, db: AsyncSession = None
    ) -> list[Task]:
        """Get every task whose owner is ``username``."""
        return await self.get_multi_by_attributes(db=db, username=username)

    @check_local_db
    async def get_all_tasks_by_date(self, *, db: AsyncSession = None) -> list[Task]:
        """Get every task, newest ``date`` first by byte-wise string comparison."""
        return await self.get_multi_by_attributes(
            db=db, order_by=date_desc_order(db.bind.dialect.name)
        )

    @check_local_db
    async def update_task(
        self, task_id: uuid.UUID, update_data: dict[str, Any], *, db: AsyncSession = None
    ) -> Task | None:
        """Overwrite the given fields of a task; None when the id is unknown."""
        task = await self.get(task_id, db=db)
        if not task:
            logger.warning(f"Task {task_id} not found for update")
            return None
        return await self.update(task, update_data, db=db)

    @check_local_db
    async def delete_task(
        self, task_id: uuid.UUID, *, db: AsyncSession = None
    ) -> Task | None:
        """Delete a task by id; None when there was nothing to delete."""
        return await self.remove(task_id, db=db)
