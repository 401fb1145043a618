import asyncio
import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, status
from app.api.v1.deps import get_abort_event, get_current_user, get_summarization_service
from app.models.summary import Summary
from app.models.user import User
from app.schemas.summary import StoredSummaryOut, SummarizeRequest
from app.services.errors import ConfigurationError, TranscriptNotFoundError
from app.services.summarizer import SummarizationService

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["summaries"])

def _requested_models(model: list[str], models: str | None) -> list[str]:
    """Union of repeated ?model= params and the comma list ?models=, first occurrence kept."""
    requested = [m.strip() for m in model]
    if models:
        requested += [m.strip() for m in models.split(",")]
    return list(dict.fromkeys(m for m in requested if m))

@router.get("/summaries")
async def list_summaries(
    transcriptId: str | None = Query(default=None),
    model: list[str] = Query(default=[]),
    models: str | None = Query(default=None),
    user: User = Depends(get_current_user),
):
    """
    Read persisted summaries for one transcript, newest first.

    Read-only: never triggers generation. Optional model filter via
    `?model=a&model=b` and/or `?models=a,b`.

    Returns:
        dict: {"success": True, "summaries": [{id, content, modelUsed, prompt, temperature, createdAt}, ...]}

    Raises:
        HTTPException (400): If transcriptId is missing
    """
    if not transcriptId:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail={"code": "BAD_REQUEST", "message": "transcriptId parameter is required"})
    try:
        tid = uuid.UUID(transcriptId)
    except ValueError:
        return {"success": True, "summaries": []}

    query = Summary.filter(transcript_id=tid)
    wanted = _requested_models(model, models)
    if wanted:
        query = query.filter(model_used__in=wanted)
    rows = await query.order_by("-created_at", "-id")

    summaries = [
        StoredSummaryOut(
            id=str(s.id),
            content=s.content,
            modelUsed=s.model_used,
            prompt=s.prompt,
            temperature=s.temperature,
            createdAt=s.created_at,
        ).model_dump(mode="json")
        for s in rows
    ]
    return {"success": True, "summaries": summaries}

@router.post("/summarize")
async def summarize(
    body: SummarizeRequest,
    user: User = Depends(get_current_user),
    service: SummarizationService = Depends(get_summarization_service),
    abort: asyncio.Event = Depends(get_abort_event),
):
    """
    Generate and persist summaries of one transcript with 1-3 models.

    Each model is called independently (at most two at a time). Successful
    calls are saved as Summary rows; failed calls are reported but not saved.
    Models not yet called when the client disconnects are reported as aborted.
    The response is successful even when some models fail, with partial=True.

    Returns:
        dict: {"success": True, "partial": bool, "results": [
            {"model", "status": "ok"|"error", "persisted": bool,
             "summary"?: {id, content, modelUsed, createdAt},
             "error"?: {code, message}}, ...]}

    Raises:
        HTTPException (404): If the transcript doesn't exist
        HTTPException (500): If the OpenRouter key is not configured
    """
    try:
        result = await service.summarize(
            transcript_id=body.transcriptId,
            models=body.models,
            prompt=body.prompt,
            temperature=body.temperature,
            abort=abort,
        )
    except TranscriptNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail={"code": "NOT_FOUND", "message": "Transcript not found"})
    except ConfigurationError as e:
        logger.error("[summarize] configuration error: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            detail={"code": "CONFIG_ERROR", "message": str(e)})
    return result.model_dump(mode="json", exclude_none=True)
