# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Your configuration and DB
from app.config import settings
from app.core.db import init_db, close_db

from app.api.v1.routers import auth, models as models_router, summaries, transcripts, tts

from app.core.bootstrap import ensure_default_user, seed_transcripts
from app.services.tts_elevenlabs import ElevenLabsClient
logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    await init_db()
    # Ensure there's a login on first run
    await ensure_default_user()
    if settings.transcripts_seed_path:
        await seed_transcripts(settings.transcripts_seed_path)

    # One speech client for the whole process, handed to routes via deps.get_tts_client
    if settings.eleven_api_key:
        app.state.tts_client = ElevenLabsClient(api_key=settings.eleven_api_key)
    else:
        app.state.tts_client = None
        logger.warning("[startup] ELEVENLABS_API_KEY not set -> TTS endpoints disabled")
    if not settings.openrouter_api_key:
        logger.warning("[startup] OPENROUTER_API_KEY not set -> /summarize will fail with CONFIG_ERROR")

@app.on_event("shutdown")
async def on_shutdown():
    client = getattr(app.state, "tts_client", None)
    if client is not None:
        await client.aclose()
    await close_db()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(transcripts.router, prefix="/api/v1")
app.include_router(summaries.router, prefix="/api/v1")
app.include_router(models_router.router, prefix="/api/v1")
app.include_router(tts.router, prefix="/api/v1/tts", tags=["TTS"])

@app.get("/healthz")
def healthz():
    return {"ok": True}
