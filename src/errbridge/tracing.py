"""Read-only access to the ambient OpenTelemetry trace context."""

from collections.abc import Mapping

from opentelemetry import context as otel_context
from opentelemetry import propagate, trace


def current_trace_id() -> str:
    """Return the active trace id as 32 lowercase hex chars, or "" if none."""
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return ""
    return trace.format_trace_id(span_context.trace_id)


def extract_context(headers: Mapping[str, str]) -> otel_context.Context:
    """Build a context from incoming propagation headers (e.g. ``traceparent``)."""
    return propagate.extract(headers)
