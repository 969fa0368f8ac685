"""
Database models for the task-tracking service.

Architecture: User (by username) ← Task.username, a weak reference by value.
"""

from taskboard.models.task import Task
from taskboard.models.user import User

__all__ = [
    "User",
    "Task",
]
