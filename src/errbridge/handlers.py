"""FastAPI exception handlers.

Every error leaving a route is rendered into the same envelope by
``render_error``; there is one handler for all exception types.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errbridge.renderer import render_error


def error_response(err: BaseException) -> JSONResponse:
    """Build the JSON error response for ``err``."""
    status_code, payload = render_error(err)
    return JSONResponse(status_code=status_code, content=payload.to_content())


async def handle_error(_request: Request, exc: Exception) -> JSONResponse:
    return error_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    RequestValidationError replaces FastAPI's default 422 response. The
    Exception handler runs in Starlette's outermost middleware, which
    re-raises after responding; install RequestContextMiddleware to catch
    errors inside the request context instead.
    """
    app.add_exception_handler(RequestValidationError, handle_error)
    app.add_exception_handler(Exception, handle_error)
