"""Business exceptions raised by services and caught at the HTTP boundary.

Services raise these to signal one of the canonical business failures.
Each class carries an ErrorKind tag; the registry maps the tag (never the
message) to a response code and HTTP status.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Closed set of business failure categories."""

    NOT_FOUND = "not_found"
    NOT_ALLOWED = "not_allowed"
    WRONG_PARAMETERS = "wrong_parameters"
    PERMISSION_DENIED = "permission_denied"
    INTERNAL_ERROR = "internal_error"


class DomainError(Exception):
    """Base class for all business exceptions."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_ERROR
    default_message: ClassVar[str] = "internal system error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "data not found"


class NotAllowedError(DomainError):
    """Raised when an action is not allowed in the current state."""

    kind = ErrorKind.NOT_ALLOWED
    default_message = "action not allowed"


class WrongParametersError(DomainError):
    """Raised when the caller passed parameters the service cannot act on."""

    kind = ErrorKind.WRONG_PARAMETERS
    default_message = "wrong parameters"


class PermissionDeniedError(DomainError):
    """Raised when the caller lacks the rights for an operation."""

    kind = ErrorKind.PERMISSION_DENIED
    default_message = "permission denied"


class InternalError(DomainError):
    """Raised for failures the caller cannot fix."""
