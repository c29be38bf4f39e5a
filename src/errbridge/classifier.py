"""Reduce any exception to an ErrorMapping.

Request binding failures (bad JSON, values that don't decode into the
declared types, failed field validation, misuse of the validator) are
recognised by type anywhere in the chain and always map to WRONG_PARAMETER.
Everything else goes through the static registry.
"""

import json

from fastapi.exceptions import RequestValidationError
from pydantic import PydanticUserError, ValidationError

from errbridge.context import first_in_chain, root_cause
from errbridge.registry import DEFAULT_MAPPING, WRONG_PARAMETER_MAPPING, ErrorMapping, lookup

# Evaluated in order; first match wins.
BINDING_ERROR_SHAPES: tuple[type[Exception], ...] = (
    json.JSONDecodeError,  # malformed syntax
    RequestValidationError,  # request data doesn't decode into handler types
    ValidationError,  # field validation failures
    PydanticUserError,  # validator invoked incorrectly
)


def is_binding_error(err: BaseException | None) -> bool:
    """Return True if the chain holds a parsing or validation failure."""
    return first_in_chain(err, BINDING_ERROR_SHAPES) is not None


def classify(err: BaseException | None) -> ErrorMapping:
    """Return the code and status for ``err``.

    Binding failures take priority over the registry because they are never
    registered instances. Unknown errors fall back to INTERNAL_ERROR / 500.
    """
    if err is None:
        return DEFAULT_MAPPING
    if is_binding_error(err):
        return WRONG_PARAMETER_MAPPING
    return lookup(root_cause(err))
