"""Static error registry.

Maps business error kinds and a few well-known third-party exceptions to
the code and HTTP status returned to clients. All tables are read-only and
built once at import.
"""

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

from fastapi import status
from sqlalchemy.exc import NoResultFound

from errbridge.exceptions import DomainError, ErrorKind


class ErrorCode(str, Enum):
    """Stable error codes for clients.

    These values are part of the public API contract and must remain stable.
    """

    NOT_FOUND = "NOT_FOUND"
    NOT_ALLOWED = "ACTION_NOT_ALLOWED"
    WRONG_PARAMETER = "WRONG_PARAMETER"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMapping(NamedTuple):
    """Response code and HTTP status for one error category."""

    code: ErrorCode
    status: int


DEFAULT_MAPPING = ErrorMapping(ErrorCode.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
WRONG_PARAMETER_MAPPING = ErrorMapping(ErrorCode.WRONG_PARAMETER, status.HTTP_400_BAD_REQUEST)

ERROR_MAPPINGS: MappingProxyType[ErrorKind, ErrorMapping] = MappingProxyType(
    {
        ErrorKind.NOT_FOUND: ErrorMapping(ErrorCode.NOT_FOUND, status.HTTP_404_NOT_FOUND),
        ErrorKind.NOT_ALLOWED: ErrorMapping(ErrorCode.NOT_ALLOWED, status.HTTP_403_FORBIDDEN),
        ErrorKind.WRONG_PARAMETERS: WRONG_PARAMETER_MAPPING,
        ErrorKind.PERMISSION_DENIED: ErrorMapping(
            ErrorCode.PERMISSION_DENIED, status.HTTP_403_FORBIDDEN
        ),
        ErrorKind.INTERNAL_ERROR: DEFAULT_MAPPING,
    }
)

# Third-party sentinels, checked in order before the kind table.
# NoResultFound is what Result.scalar_one() / one() raise on an empty result.
EXTERNAL_MAPPINGS: tuple[tuple[type[BaseException], ErrorMapping], ...] = (
    (NoResultFound, ErrorMapping(ErrorCode.NOT_FOUND, status.HTTP_404_NOT_FOUND)),
)


def lookup(err: BaseException | None) -> ErrorMapping:
    """Return the registered mapping for ``err``, or the INTERNAL_ERROR default.

    Matching is by type and kind tag only. Two exceptions with the same
    message but different types never share a mapping.
    """
    if err is None:
        return DEFAULT_MAPPING
    for exc_type, mapping in EXTERNAL_MAPPINGS:
        if isinstance(err, exc_type):
            return mapping
    if isinstance(err, DomainError):
        return ERROR_MAPPINGS.get(err.kind, DEFAULT_MAPPING)
    return DEFAULT_MAPPING
