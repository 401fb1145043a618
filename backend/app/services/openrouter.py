"""
OpenRouter Completion Service

Sends one chat-completion request per call and classifies the outcome:
- HTTP 429              -> RATE_LIMIT
- HTTP >= 500           -> SERVER_ERROR
- other non-2xx         -> API_ERROR
- 2xx without any text  -> NO_CONTENT
- timeout / network / abort -> UNKNOWN_ERROR
"""
import asyncio
import logging
from typing import Optional

import httpx

from ..config import settings
from .errors import ConfigurationError, ModelCallError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful assistant that summarizes voice notes accurately and concisely."


class OpenRouterClient:
    """Chat-completion client for OpenRouter"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_tokens: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.openrouter_api_key
        self.api_url = api_url or settings.openrouter_api_url
        self.timeout = timeout if timeout is not None else settings.summarize_timeout_seconds
        self.max_tokens = max_tokens if max_tokens is not None else settings.summary_max_tokens
        self._transport = transport  # Injected in tests (httpx.MockTransport)

    def is_available(self) -> bool:
        """Check if API key is configured"""
        return bool(self.api_key)

    def build_payload(self, model: str, prompt: str, transcript_text: str, temperature: float) -> dict:
        return {
            "model": model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"{prompt}\n\nTranscript to summarize:\n{transcript_text}"},
            ],
            "temperature": temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete(
        self,
        model: str,
        prompt: str,
        transcript_text: str,
        temperature: float,
        abort: Optional[asyncio.Event] = None,
    ) -> str:
        """
        Summarize transcript_text with one model.

        Parameters:
            model: OpenRouter model identifier
            prompt: User instruction placed before the transcript
            transcript_text: Transcript body
            temperature: Sampling temperature (0-1)
            abort: Caller's cancellation flag; checked before the request starts

        Returns:
            Generated text from the first completion choice

        Raises:
            ModelCallError: Classified failure (see module docstring)
            ConfigurationError: No API key configured
        """
        if abort is not None and abort.is_set():
            raise ModelCallError(ModelCallError.UNKNOWN_ERROR, "Request aborted")
        if not self.api_key:
            raise ConfigurationError("OpenRouter API key not configured")

        payload = self.build_payload(model, prompt, transcript_text, temperature)
        logger.info("[openrouter] POST model=%s temperature=%s", model, temperature)

        # Hard deadline for the whole exchange, independent of httpx's per-phase timeouts
        try:
            resp = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise ModelCallError(ModelCallError.UNKNOWN_ERROR, f"Request timed out after {self.timeout:g}s")
        except httpx.HTTPError as e:
            raise ModelCallError(ModelCallError.UNKNOWN_ERROR, str(e) or e.__class__.__name__)

        return self._extract_content(resp)

    async def _post(self, payload: dict) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": settings.app_url,
            "X-Title": settings.app_title,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.post(self.api_url, headers=headers, json=payload)

    def _extract_content(self, resp: httpx.Response) -> str:
        if not resp.is_success:
            provider_message = _provider_error_message(resp)
            if resp.status_code == 429:
                raise ModelCallError(ModelCallError.RATE_LIMIT, provider_message or "Rate limited")
            if resp.status_code >= 500:
                raise ModelCallError(ModelCallError.SERVER_ERROR, provider_message or "Server error")
            raise ModelCallError(
                ModelCallError.API_ERROR,
                provider_message or resp.reason_phrase or f"HTTP {resp.status_code}",
            )

        try:
            data = resp.json()
        except ValueError:
            data = None

        content = None
        if isinstance(data, dict):
            choices = data.get("choices") or []
            if choices and isinstance(choices[0], dict):
                content = (choices[0].get("message") or {}).get("content")

        if not isinstance(content, str) or not content.strip():
            raise ModelCallError(ModelCallError.NO_CONTENT, "No content received from model")
        return content


def _provider_error_message(resp: httpx.Response) -> Optional[str]:
    """Pull error.message out of a provider error body, if it has one."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    err = body.get("error")
    if isinstance(err, dict):
        return err.get("message") or None
    if isinstance(err, str):
        return err or None
    return None
