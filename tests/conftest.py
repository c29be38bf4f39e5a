from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from errbridge.logging import LoggingSettings, configure_logging
from errbridge.main import create_app
from tests.routes import router

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/spans.py) are invisible unless we register them here.
pytest_plugins = ["tests.spans"]


@pytest.fixture(scope="session", autouse=True)
def structured_logging() -> None:
    """Route structlog through stdlib logging so caplog sees error events."""
    configure_logging(LoggingSettings())


@pytest.fixture
def app() -> FastAPI:
    """Fresh app with the error envelope and the test routes."""
    app = create_app()
    app.include_router(router)
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
