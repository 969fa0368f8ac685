"""
Base configuration and mixins for database models.

The two collections of the service (users and tasks) are flat tables with
store-generated UUID identifiers.
"""

import uuid

from sqlalchemy import Column, Uuid
from sqlalchemy.orm import declarative_base

# Create the base class for all models
Base = declarative_base()


class UUIDMixin:
    """
    Mixin class that adds a UUID primary key to models.

    The identifier is generated with uuid4() on insert and is opaque to
    clients.
    """

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
        comment="Primary key using UUID4 format",
    )


__all__ = ["Base", "UUIDMixin"]
