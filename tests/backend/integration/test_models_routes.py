import pytest

from app.api.v1.routers.models import display_name
from app.config import AVAILABLE_MODELS, DEFAULT_TEMPERATURE


pytestmark = pytest.mark.asyncio


async def test_model_catalogue(client):
    resp = await client.get("/api/v1/models")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [m["id"] for m in data["models"]] == AVAILABLE_MODELS
    assert data["models"][0]["label"] == "llama-4-scout"
    assert data["defaultTemperature"] == DEFAULT_TEMPERATURE
    assert data["defaultPrompt"]


async def test_display_name_without_vendor_prefix():
    assert display_name("openai/gpt-oss-20b:free") == "gpt-oss-20b"
    assert display_name("plain-model") == "plain-model"


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.json() == {"ok": True}
