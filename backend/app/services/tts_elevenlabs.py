import asyncio
import logging
from typing import AsyncGenerator, Optional

import httpx

from app.config import settings
from app.services.errors import TTSError

logger = logging.getLogger(__name__)


class ElevenLabsClient:
    """
    ElevenLabs text-to-speech client.

    Built once at startup (see app.main) and handed to routes through
    app.api.v1.deps.get_tts_client. Holds one pooled httpx.AsyncClient.
    """

    def __init__(
        self,
        api_key: str,
        api_base: Optional[str] = None,
        model_id: Optional[str] = None,
        output_format: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("ElevenLabs API key is required")
        self.api_base = (api_base or settings.eleven_api_base).rstrip("/")
        self.model_id = model_id or settings.eleven_model_id
        self.output_format = output_format or settings.eleven_output_format
        self._http = httpx.AsyncClient(
            headers={"xi-api-key": api_key},
            timeout=httpx.Timeout(60.0, connect=10.0),
            transport=transport,
        )

    async def stream(self, text: str, voice_id: str) -> AsyncGenerator[bytes, None]:
        """
        Call ElevenLabs API for streaming TTS

        Parameters:
        - text: Text to synthesize
        - voice_id: ElevenLabs voice ID
        """
        url = f"{self.api_base}/text-to-speech/{voice_id}/stream"
        payload = {"text": text, "model_id": self.model_id}
        logger.info("[tts] HTTP POST %s chars=%d", url, len(text))
        try:
            async with self._http.stream(
                "POST",
                url,
                params={"output_format": self.output_format},
                headers={"accept": "audio/mpeg", "content-type": "application/json"},
                json=payload,
            ) as resp:
                if not resp.is_success:
                    await resp.aread()
                    raise TTSError(_error_detail(resp), status_code=resp.status_code)
                async for chunk in resp.aiter_bytes():
                    if chunk:
                        yield chunk
                    await asyncio.sleep(0)
        except httpx.HTTPError as e:
            raise TTSError(str(e) or e.__class__.__name__) from e

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        """Collect the streamed audio into one MP3 payload."""
        audio_chunks = []
        async for chunk in self.stream(text, voice_id):
            audio_chunks.append(chunk)
        audio = b"".join(audio_chunks)
        if not audio:
            raise TTSError("ElevenLabs returned no audio")
        logger.info("[tts] generation completed, size: %d bytes", len(audio))
        return audio

    async def list_voices(self) -> list[dict]:
        try:
            resp = await self._http.get(f"{self.api_base}/voices")
        except httpx.HTTPError as e:
            raise TTSError(str(e) or e.__class__.__name__) from e
        if not resp.is_success:
            raise TTSError(_error_detail(resp), status_code=resp.status_code)
        try:
            body = resp.json()
        except ValueError as e:
            raise TTSError("ElevenLabs returned an unreadable voice list") from e
        voices = (body if isinstance(body, dict) else {}).get("voices") or []
        return [
            {
                "voice_id": v.get("voice_id"),
                "name": v.get("name"),
                "category": v.get("category"),
                "description": v.get("description"),
            }
            for v in voices
        ]

    async def aclose(self) -> None:
        await self._http.aclose()


def _error_detail(resp: httpx.Response) -> str:
    # ElevenLabs errors look like {"detail": {"status": "...", "message": "..."}} or {"detail": "..."}
    try:
        body = resp.json()
    except ValueError:
        return f"ElevenLabs HTTP {resp.status_code}"
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, dict) and detail.get("message"):
        return detail["message"]
    if isinstance(detail, str) and detail:
        return detail
    return f"ElevenLabs HTTP {resp.status_code}"
