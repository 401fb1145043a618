# app/api/v1/deps.py
import asyncio
from typing import AsyncIterator
from fastapi import Header, HTTPException, Request, status
from app.core.security import decode_access_token
from app.models.user import User
from app.services.summarizer import SummarizationService
from app.services.tts_elevenlabs import ElevenLabsClient

async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
):
    """
    FastAPI dependency to get the current authenticated user.

    This dependency extracts and validates the JWT token from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (accessToken) - fallback method

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)
        HTTPException (401): If token is invalid or expired (AUTH_INVALID_TOKEN)
        HTTPException (401): If user not found in database (AUTH_USER_NOT_FOUND)
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: accessToken
    if not token:
        token = request.cookies.get("accessToken")

    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")

    try:
        payload = decode_access_token(token)
        user_id: str = payload.get("sub")
    except Exception:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_TOKEN")

    user = await User.get_or_none(id=user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_USER_NOT_FOUND")
    return user

def get_summarization_service() -> SummarizationService:
    """Per-request summarizer built from settings (tests override this dependency)."""
    return SummarizationService()

def get_tts_client(request: Request) -> ElevenLabsClient:
    """
    Return the ElevenLabs client created at startup.

    Raises:
        HTTPException (500): CONFIG_ERROR if no client was configured
    """
    client = getattr(request.app.state, "tts_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "CONFIG_ERROR", "message": "ElevenLabs API key not configured"},
        )
    return client

DISCONNECT_POLL_SECONDS = 0.5

async def get_abort_event(request: Request) -> AsyncIterator[asyncio.Event]:
    """
    Cancellation flag for the current request.

    Set as soon as the client disconnects. Checked once up front so a request
    that is already gone never reaches the model provider.
    """
    abort = asyncio.Event()
    if await request.is_disconnected():
        abort.set()

    async def _watch():
        while not abort.is_set():
            await asyncio.sleep(DISCONNECT_POLL_SECONDS)
            if await request.is_disconnected():
                abort.set()

    watcher = asyncio.create_task(_watch())
    try:
        yield abort
    finally:
        watcher.cancel()
