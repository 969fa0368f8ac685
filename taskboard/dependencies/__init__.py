from .services import (
    get_auth_service,
    get_session_factory,
    get_task_db_handler,
    get_task_service,
    get_user_db_handler,
)

__all__ = [
    "get_auth_service",
    "get_session_factory",
    "get_task_db_handler",
    "get_task_service",
    "get_user_db_handler",
]
