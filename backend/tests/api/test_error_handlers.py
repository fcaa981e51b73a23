"""Global error handlers — domain envelope, catch-all 500, 405 rendering scope."""

import pytest
from httpx import ASGITransport, AsyncClient

from users_service.core.errors import ValidationError
from users_service.main import create_app


@pytest.fixture
async def failing_client(settings):
    app = create_app(settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.get("/reject")
    async def reject():
        raise ValidationError("email cannot be empty", field="email")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_becomes_internal_error(failing_client):
    res = await failing_client.get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret internals" not in res.text


async def test_domain_error_uses_its_envelope(failing_client):
    res = await failing_client.get("/reject")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["message"] == "email cannot be empty"
    assert error["context"]["field"] == "email"


async def test_unknown_path_keeps_default_404(failing_client):
    res = await failing_client.get("/nowhere")
    assert res.status_code == 404
    assert res.json() == {"detail": "Not Found"}
