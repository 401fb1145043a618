# app/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles first-run setup: the default dashboard login and transcript seeding.
"""
import os
import json
import logging
from pathlib import Path
from app.models.user import User
from app.models.transcript import Transcript
from app.schemas.transcript import SeedTranscript
from app.core.security import hash_password

logger = logging.getLogger("uvicorn.error")

async def ensure_default_user() -> None:
    """
    If no user exists in the database, create one from environment variables.
    Environment variables:
      DEFAULT_USERNAME (default: "admin")
      DEFAULT_PASSWORD (required, otherwise won't create)
    """
    if await User.all().exists():
        return

    password = os.getenv("DEFAULT_PASSWORD")
    if not password:
        logger.warning("[bootstrap] No user present, but DEFAULT_PASSWORD not set -> skip creating default user.")
        return

    username = os.getenv("DEFAULT_USERNAME", "admin")
    u = await User.create(username=username, password_hash=hash_password(password))
    logger.warning("[bootstrap] Created default user -> username=%s id=%s", u.username, u.id)

async def seed_transcripts(path: str | Path) -> int:
    """
    Upsert transcripts from a JSON file containing [{"title": ..., "content": ...}, ...].

    Title is the upsert key: an existing transcript with the same title gets its
    content replaced, otherwise a new one is created.

    Returns:
        Number of entries processed

    Raises:
        FileNotFoundError: If the seed file doesn't exist
        pydantic.ValidationError: If an entry is missing title/content
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    entries = [SeedTranscript.model_validate(item) for item in raw]
    for entry in entries:
        await Transcript.update_or_create(
            defaults={"content": entry.content},
            title=entry.title,
        )
    logger.info("[bootstrap] Seeded %d transcripts from %s", len(entries), path)
    return len(entries)
