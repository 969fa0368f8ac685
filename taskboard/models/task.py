"""
Task model for per-user task lists.

A task names its owner by value (``username``) without a foreign key, so no
referential integrity is enforced between tasks and users. ``date`` and
``time`` are opaque strings; the admin view orders by ``date`` as text.
"""

from sqlalchemy import Boolean, Column, Float, Index, String, Text

from taskboard.models.base import Base, UUIDMixin


class Task(Base, UUIDMixin):
    """A single entry of a user's task list."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_username", "username"),
        Index("ix_tasks_date", "date"),
    )

    username = Column(String(255), nullable=True, comment="Owner username")
    title = Column(Text, nullable=True)
    date = Column(String(64), nullable=True, comment="Free-form date text")
    time = Column(String(64), nullable=True, comment="Free-form time text")
    alarm = Column(Boolean, nullable=True)
    done = Column(Boolean, nullable=True)
    score = Column(Float, nullable=True)

    def __repr__(self):
        return f"<Task(id={self.id}, username='{self.username}', title='{self.title}')>"
