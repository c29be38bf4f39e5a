"""FastAPI middleware for request context and terminal error handling."""

import uuid
from collections.abc import Awaitable, Callable

import structlog
from opentelemetry import context as otel_context
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from errbridge.config import settings
from errbridge.handlers import error_response
from errbridge.tracing import current_trace_id, extract_context


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Set up per-request context and turn escaping exceptions into responses.

    - Attaches the incoming trace context (``traceparent``) so error payloads
      carry the caller's trace id
    - Reads the request id header, or generates a UUID if missing
    - Binds request_id and trace_id to structlog context (auto-included in all logs)
    - Renders any exception raised by the route with ``error_response``
    - Adds the request id to response headers

    Usage:
        app.add_middleware(RequestContextMiddleware)
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        trace_propagation: bool | None = None,
        request_id_header: str | None = None,
    ) -> None:
        super().__init__(app)
        # Unset options fall back to the application settings
        self.trace_propagation = (
            settings.trace_propagation if trace_propagation is None else trace_propagation
        )
        self.request_id_header = request_id_header or settings.request_id_header

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())

        token = None
        if self.trace_propagation:
            token = otel_context.attach(extract_context(request.headers))
        try:
            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(request_id=request_id)
            trace_id = current_trace_id()
            if trace_id:
                structlog.contextvars.bind_contextvars(trace_id=trace_id)
            try:
                response = await call_next(request)
            except Exception as exc:
                response = error_response(exc)
        finally:
            if token is not None:
                otel_context.detach(token)

        response.headers[self.request_id_header] = request_id
        return response
