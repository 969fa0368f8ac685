from taskboard.services.auth_service import AuthService
from taskboard.services.task_service import TaskService

__all__ = ["AuthService", "TaskService"]
