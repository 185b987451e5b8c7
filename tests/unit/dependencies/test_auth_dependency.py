from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from credo.core.dependencies.auth import CurrentSubject
from credo.core.handlers import register_exception_handlers
from credo.infrastructure.dependency_injection.auth_dependencies import get_token_service
from credo.infrastructure.services.token_service import JWTTokenService


@pytest.fixture
def guarded():
    """A bare app with one protected route; records whether the body ran."""
    app = FastAPI()
    register_exception_handlers(app)
    app.state.calls = []

    @app.get("/protected")
    async def protected(subject: CurrentSubject):
        app.state.calls.append(subject)
        return {"subject": subject}

    return app


@pytest_asyncio.fixture
async def client(guarded):
    async with AsyncClient(transport=ASGITransport(app=guarded), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_valid_token_exposes_subject(client, guarded):
    token = get_token_service().issue("subject-1")

    response = await client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == {"subject": "subject-1"}
    assert guarded.state.calls == ["subject-1"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers, code",
    [
        ({}, "missing_token"),
        ({"Authorization": "Basic dXNlcjpwYXNz"}, "missing_token"),
        ({"Authorization": "Bearer not-a-token"}, "invalid_token"),
    ],
)
async def test_rejections_are_401_with_challenge(client, guarded, headers, code):
    response = await client.get("/protected", headers=headers)

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["code"] == code
    assert guarded.state.calls == []


@pytest.mark.asyncio
async def test_expired_token_is_rejected(client, guarded):
    past = datetime.now(timezone.utc) - timedelta(hours=4)
    token = get_token_service().issue("subject-1", current_time=past)

    response = await client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["code"] == "token_expired"
    assert guarded.state.calls == []


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_rejected(client, guarded):
    forged = JWTTokenService(secret_key="x" * 40).issue("subject-1")

    response = await client.get("/protected", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
    assert response.json()["code"] == "invalid_token"
    assert guarded.state.calls == []


@pytest.mark.asyncio
async def test_detail_is_translated(client):
    response = await client.get("/protected", headers={"Accept-Language": "es"})

    assert response.json()["detail"] == "No se proporcionaron credenciales de autenticación"
