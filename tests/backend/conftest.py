import asyncio
import json
import os
import uuid

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from app.core import db as db_module
from app.core.security import hash_password
from app.main import app
from app.models.transcript import Transcript
from app.models.user import User


TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """Fresh database without an HTTP client (service-level tests)."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    try:
        transport = ASGITransport(app=app, lifespan="off")
    except TypeError:
        # Fallback for httpx versions that don't support lifespan parameter
        transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.dependency_overrides.clear()
    if hasattr(app.state, "tts_client"):
        del app.state.tts_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create dashboard users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        user = await User.create(
            username=f"user_{uuid.uuid4().hex[:6]}",
            password_hash=hash_password(password),
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_headers(client, create_user):
    """
    Authorization headers for a freshly created user, obtained via the login endpoint.
    """
    user, password = await create_user()
    resp = await client.post(
        "/api/v1/auth/login",
        json={"username": user.username, "password": password},
    )
    assert resp.status_code == 200, resp.text
    token = resp.json()["data"]["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def create_transcript():
    """
    Factory fixture to create transcripts directly via ORM.
    """

    async def _create_transcript(title: str | None = None, content: str = "We talked about the Q3 roadmap.") -> Transcript:
        return await Transcript.create(
            title=title or f"Note {uuid.uuid4().hex[:6]}",
            content=content,
        )

    return _create_transcript


class FakeOpenRouter:
    """
    httpx.MockTransport handler that answers chat-completion requests per model.

    `behaviours` maps model id -> (status_code, json_body). Unlisted models succeed
    with "summary from <model>". Every request is recorded in `calls`.
    """

    def __init__(self, behaviours: dict | None = None, delay: float = 0.0):
        self.behaviours = behaviours or {}
        self.delay = delay
        self.calls: list[dict] = []
        self.in_flight = 0
        self.peak = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.calls.append({"payload": payload, "headers": dict(request.headers)})
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            model = payload["model"]
            status, body = self.behaviours.get(
                model,
                (200, {"choices": [{"message": {"content": f"summary from {model}"}}]}),
            )
            return httpx.Response(status, json=body)
        finally:
            self.in_flight -= 1

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def models_called(self) -> list[str]:
        return [c["payload"]["model"] for c in self.calls]


@pytest.fixture
def fake_openrouter():
    """Factory: build a FakeOpenRouter and wire it into the app's summarizer dependency."""
    from app.api.v1.deps import get_summarization_service
    from app.services.openrouter import OpenRouterClient
    from app.services.summarizer import SummarizationService

    def _install(behaviours: dict | None = None, delay: float = 0.0, api_key: str = "test-key") -> FakeOpenRouter:
        fake = FakeOpenRouter(behaviours, delay=delay)
        client = OpenRouterClient(api_key=api_key, transport=fake.transport)
        app.dependency_overrides[get_summarization_service] = lambda: SummarizationService(client=client)
        return fake

    return _install
