"""Turn an exception into an HTTP status and an ErrorResponse.

This is the terminal step for every error: it classifies, logs the full
context string, resolves the trace id and builds the payload. It never
raises.
"""

from collections.abc import Mapping
from typing import Any

from pydantic_core import to_jsonable_python

from errbridge.classifier import classify
from errbridge.context import ContextError
from errbridge.logging import get_logger
from errbridge.schemas.error import ErrorResponse
from errbridge.tracing import current_trace_id

logger = get_logger(__name__)


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _to_json(value: Any) -> Any:
    # Unknown types become their str(); NaN and infinities become null
    return to_jsonable_python(value, fallback=_safe_str, inf_nan_mode="null")


def _jsonable(details: Mapping[str, Any]) -> dict[str, Any]:
    try:
        return _to_json(dict(details))  # type: ignore[no-any-return]
    except ValueError:
        pass
    # Some value can't be encoded as a whole (e.g. a circular reference)
    data: dict[str, Any] = {}
    for key, value in details.items():
        try:
            data[key] = _to_json(value)
        except ValueError:
            data[key] = _safe_str(value)
    return data


def render_error(err: BaseException) -> tuple[int, ErrorResponse]:
    """Classify ``err``, log it and build the response payload.

    Only the outermost ContextError contributes details. The message is the
    string of its direct cause, so context from inner wrappers still shows
    up there.
    """
    if isinstance(err, ContextError):
        cause: BaseException = err.cause
        details: Mapping[str, Any] = err.details
    else:
        cause = err
        details = {}

    mapping = classify(cause)

    log_fields: dict[str, Any] = {
        "error": _safe_str(err),
        "error_type": type(err).__name__,
        "code": mapping.code.value,
        "status": mapping.status,
    }
    if mapping.status >= 500:
        log_fields["exc_info"] = err
    logger.error("request_error", **log_fields)

    payload = ErrorResponse(
        code=mapping.code.value,
        message=_safe_str(cause),
        details=_jsonable(details) or None,
        request_id=current_trace_id(),
    )
    return mapping.status, payload


def render(err: BaseException | None) -> tuple[int, ErrorResponse] | None:
    """Render ``err``; ``None`` means there is nothing to send."""
    if err is None:
        return None
    return render_error(err)
