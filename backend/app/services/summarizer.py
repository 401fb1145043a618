"""
Summarization Service

Fans one transcript out to 1-3 models through a ConcurrencyLimiter, persists a
Summary row for every successful call and reports every model's outcome.
A failing model never aborts its siblings; the aggregate is flagged partial.
"""
import asyncio
import logging
import uuid
from typing import List, Optional, Sequence

from ..config import settings
from ..core.limiter import ConcurrencyLimiter
from ..models.summary import Summary
from ..models.transcript import Transcript
from ..schemas.summary import GenerateResult, ResultError, SummaryOut, SummaryResult
from .errors import ConfigurationError, ModelCallError, TranscriptNotFoundError
from .openrouter import OpenRouterClient

logger = logging.getLogger(__name__)


async def find_transcript(transcript_id: str) -> Optional[Transcript]:
    """Look up a transcript; ids that are not valid UUIDs simply don't exist."""
    try:
        tid = uuid.UUID(str(transcript_id))
    except ValueError:
        return None
    return await Transcript.get_or_none(id=tid)


class SummarizationService:
    """Multi-model summarization with bounded concurrency and per-model isolation"""

    def __init__(self, client: Optional[OpenRouterClient] = None, concurrency: Optional[int] = None):
        self.client = client or OpenRouterClient()
        self.concurrency = concurrency or settings.summarize_concurrency

    async def summarize(
        self,
        transcript_id: str,
        models: Sequence[str],
        prompt: str,
        temperature: float,
        abort: Optional[asyncio.Event] = None,
    ) -> GenerateResult:
        """
        Summarize one transcript with every requested model.

        Args:
            transcript_id: Transcript UUID string
            models: Model identifiers; duplicates are dropped, first occurrence wins
            prompt: Instruction sent ahead of the transcript
            temperature: Sampling temperature shared by all calls
            abort: Optional cancellation flag handed to each call

        Returns:
            GenerateResult with one entry per unique model, in request order

        Raises:
            TranscriptNotFoundError: Unknown transcript (no model is contacted)
            ConfigurationError: No OpenRouter key (no model is contacted)
        """
        unique_models: List[str] = list(dict.fromkeys(models))

        transcript = await find_transcript(transcript_id)
        if transcript is None:
            raise TranscriptNotFoundError(transcript_id)

        if not self.client.is_available():
            raise ConfigurationError("OpenRouter API key not configured")

        # Scoped to this request
        limiter = ConcurrencyLimiter(self.concurrency)

        async def run_one(model: str) -> SummaryResult:
            return await self._summarize_one(transcript, model, prompt, temperature, abort)

        results = await limiter.map(run_one, unique_models)
        partial = any(r.status == "error" for r in results)
        logger.info(
            "[summarize] transcript=%s models=%d ok=%d partial=%s",
            transcript.id, len(results), sum(r.status == "ok" for r in results), partial,
        )
        return GenerateResult(success=True, partial=partial, results=results)

    async def _summarize_one(
        self,
        transcript: Transcript,
        model: str,
        prompt: str,
        temperature: float,
        abort: Optional[asyncio.Event],
    ) -> SummaryResult:
        try:
            content = await self.client.complete(model, prompt, transcript.content, temperature, abort=abort)
            summary = await Summary.create(
                transcript=transcript,
                model_used=model,
                prompt=prompt,
                temperature=temperature,
                content=content,
            )
        except ModelCallError as e:
            logger.error("[summarize] model=%s failed: %s %s", model, e.code, e.message)
            return _error_result(model, e.code, e.message)
        except Exception as e:
            logger.exception("[summarize] model=%s unexpected error", model)
            return _error_result(model, ModelCallError.UNKNOWN_ERROR, str(e) or "Unknown error")

        return SummaryResult(
            model=model,
            status="ok",
            persisted=True,
            summary=SummaryOut(
                id=str(summary.id),
                content=summary.content,
                modelUsed=summary.model_used,
                createdAt=summary.created_at,
            ),
        )


def _error_result(model: str, code: str, message: str) -> SummaryResult:
    return SummaryResult(
        model=model,
        status="error",
        persisted=False,
        error=ResultError(code=code, message=message),
    )
