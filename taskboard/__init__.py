"""
Taskboard: username-based sign-in, per-user task lists and an admin task view.

Architecture: HTTP routers → services → DB handlers → SQLAlchemy models.
"""

__version__ = "0.1.0"
