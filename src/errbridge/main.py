from fastapi import FastAPI

from errbridge.config import Settings, settings
from errbridge.handlers import register_error_handlers
from errbridge.logging import LoggingSettings, configure_logging
from errbridge.middleware import RequestContextMiddleware


async def health() -> dict[str, str]:
    """Liveness check for load balancers and container orchestrators."""
    return {"status": "ok"}


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build a FastAPI app with the error envelope wired in.

    Routers registered on the returned app can raise any exception (wrapped
    with ``errbridge.context.wrap`` or not) and clients get the standard
    error body.

    Serve directly with ``uvicorn errbridge.main:create_app --factory``.
    """
    app_settings = app_settings or settings
    if app_settings.configure_logging:
        configure_logging(LoggingSettings())

    app = FastAPI(title=app_settings.app_name)
    app.add_middleware(
        RequestContextMiddleware,
        trace_propagation=app_settings.trace_propagation,
        request_id_header=app_settings.request_id_header,
    )
    register_error_handlers(app)
    app.add_api_route("/health", health, methods=["GET"])
    return app
