"""API test fixtures — FastAPI app built from explicit Settings + httpx client.

Invariants:
    - Every test gets an app built by create_app() from its own Settings
    - No lifespan/server: requests go through ASGITransport in-process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_service.main import create_app


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
