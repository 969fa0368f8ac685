"""
User model for username-based identification.

Users carry no credentials: registering creates the row, signing in only
checks that it exists. The admin flag is provisioned out of band.
"""

from sqlalchemy import Boolean, Column, Index, String

from taskboard.models.base import Base, UUIDMixin


class User(Base, UUIDMixin):
    """Registered user, identified by a unique username."""

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_username", "username", unique=True),)

    username = Column(
        String(255),
        nullable=False,
        comment="Unique username used for sign-in and task ownership",
    )

    is_admin = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Grants access to the admin task view",
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', is_admin={self.is_admin})>"
