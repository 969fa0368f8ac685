"""
Error taxonomy for the service layer.

Every failure a service reports is one of a closed set of kinds, each bound
to an HTTP status. The HTTP layer turns any ``ServiceError`` into
``{"error": <message>}`` with that status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.INTERNAL: 500,
}


class ServiceError(Exception):
    """Base class for errors raised by services."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class ValidationError(ServiceError):
    """A required field is missing or empty."""

    kind = ErrorKind.VALIDATION


class ConflictError(ServiceError):
    """The record would duplicate a unique key."""

    kind = ErrorKind.CONFLICT


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND


class ForbiddenError(ServiceError):
    kind = ErrorKind.FORBIDDEN


class InternalError(ServiceError):
    """Unexpected store failure. The message is generic and leaks no detail."""

    kind = ErrorKind.INTERNAL
