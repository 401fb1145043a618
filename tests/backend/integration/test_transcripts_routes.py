import datetime as dt
import json
import uuid

import pytest

from app.core.bootstrap import seed_transcripts
from app.models.transcript import Transcript


pytestmark = pytest.mark.asyncio


async def test_list_transcripts_newest_first(client, auth_headers):
    base = dt.datetime(2025, 3, 1, tzinfo=dt.timezone.utc)
    await Transcript.create(title="Old", content="first", created_at=base)
    await Transcript.create(title="New", content="second", created_at=base + dt.timedelta(days=1))

    resp = await client.get("/api/v1/transcripts", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [t["title"] for t in body["transcripts"]] == ["New", "Old"]
    assert set(body["transcripts"][0]) == {"id", "title", "content", "createdAt"}


async def test_get_transcript_by_id(client, auth_headers, create_transcript):
    transcript = await create_transcript(title="Standup", content="Shipped the parser.")

    resp = await client.get(f"/api/v1/transcripts/{transcript.id}", headers=auth_headers)

    assert resp.status_code == 200
    data = resp.json()["transcript"]
    assert data["id"] == str(transcript.id)
    assert data["title"] == "Standup"
    assert data["content"] == "Shipped the parser."


@pytest.mark.parametrize("tid", [str(uuid.uuid4()), "missing"])
async def test_get_unknown_transcript_is_404(client, auth_headers, tid):
    resp = await client.get(f"/api/v1/transcripts/{tid}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "NOT_FOUND"


async def test_transcripts_require_login(client):
    resp = await client.get("/api/v1/transcripts")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "AUTH_REQUIRED"


async def test_seed_upserts_by_title(client, tmp_path):
    seed = tmp_path / "voice_transcript.json"
    seed.write_text(json.dumps([
        {"title": "Groceries", "content": "milk, eggs"},
        {"title": "Ideas", "content": "podcast about tea"},
    ]), encoding="utf-8")

    assert await seed_transcripts(seed) == 2
    assert await Transcript.all().count() == 2

    seed.write_text(json.dumps([{"title": "Groceries", "content": "milk, eggs, bread"}]), encoding="utf-8")
    assert await seed_transcripts(str(seed)) == 1

    assert await Transcript.all().count() == 2
    groceries = await Transcript.get(title="Groceries")
    assert groceries.content == "milk, eggs, bread"
