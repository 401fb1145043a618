"""
TTS HTTP API Router

Converts summary text to speech through ElevenLabs
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api.v1.deps import get_current_user, get_tts_client
from app.config import settings
from app.models.user import User
from app.schemas.tts import TtsRequest, VoiceOut
from app.services.errors import TTSError
from app.services.tts_elevenlabs import ElevenLabsClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def synthesize_tts(
    req: TtsRequest,
    user: User = Depends(get_current_user),
    client: ElevenLabsClient = Depends(get_tts_client),
):
    """
    Synthesize speech for a piece of text.

    Parameters:
    - text: Text to synthesize (max settings.tts_max_chars characters)
    - voiceId: ElevenLabs voice ID (optional)

    Returns:
    - audio/mpeg bytes
    """
    if not req.text or not req.text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Valid text is required")
    if len(req.text) > settings.tts_max_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text too long. Maximum {settings.tts_max_chars} characters allowed",
        )

    voice_id = req.voiceId or settings.default_voice_id
    try:
        audio = await client.synthesize(req.text, voice_id)
    except TTSError as e:
        logger.error("[tts] ElevenLabs error (status=%s): %s", e.status_code, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Failed to generate speech: {e}")

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={
            "Content-Length": str(len(audio)),
            "Cache-Control": "public, max-age=31536000",
        },
    )


@router.get("/voices")
async def list_voices(
    user: User = Depends(get_current_user),
    client: ElevenLabsClient = Depends(get_tts_client),
):
    """List the voices available to the configured ElevenLabs account."""
    try:
        voices = await client.list_voices()
    except TTSError as e:
        logger.error("[tts] failed to fetch voices: %s", e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to fetch available voices")
    return {"voices": [VoiceOut(**v).model_dump() for v in voices]}
