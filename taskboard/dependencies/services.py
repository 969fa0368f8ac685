"""
FastAPI dependencies that hand the process-wide session factory to services.

The session factory is created once in the application lifespan and lives on
``app.state``; nothing below opens a connection by itself.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.db_handlers import TaskDBHandler, UserDBHandler
from taskboard.services import AuthService, TaskService


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_user_db_handler(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> UserDBHandler:
    return UserDBHandler(session_factory)


def get_task_db_handler(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> TaskDBHandler:
    return TaskDBHandler(session_factory)


def get_auth_service(
    user_db_handler: UserDBHandler = Depends(get_user_db_handler),
) -> AuthService:
    return AuthService(user_db_handler)


def get_task_service(
    task_db_handler: TaskDBHandler = Depends(get_task_db_handler),
) -> TaskService:
    return TaskService(task_db_handler)
