"""
Pydantic schemas for summarization endpoints.
Defines the summarize request, per-model results and stored summary rows.
"""
import datetime as dt
from typing import Annotated, List, Literal, Optional
from pydantic import BaseModel, Field

MAX_MODELS_PER_REQUEST = 3
MAX_PROMPT_CHARS = 1000

class SummarizeRequest(BaseModel):
    """
    Request model for POST /summarize.
    Duplicate model identifiers are accepted here and removed before dispatch.
    """
    transcriptId: str = Field(min_length=1)
    models: List[Annotated[str, Field(min_length=1)]] = Field(min_length=1, max_length=MAX_MODELS_PER_REQUEST)
    prompt: str = Field(min_length=1, max_length=MAX_PROMPT_CHARS)
    temperature: float = Field(ge=0.0, le=1.0)

class SummaryOut(BaseModel):
    """Summary as returned inside a successful result entry."""
    id: str
    content: str
    modelUsed: str
    createdAt: dt.datetime

class ResultError(BaseModel):
    code: str  # RATE_LIMIT, SERVER_ERROR, API_ERROR, NO_CONTENT, UNKNOWN_ERROR
    message: str

class SummaryResult(BaseModel):
    """
    Outcome of one model call.
    status="ok" always comes with persisted=True and a summary;
    status="error" always comes with persisted=False and an error.
    """
    model: str
    status: Literal["ok", "error"]
    persisted: bool
    summary: Optional[SummaryOut] = None
    error: Optional[ResultError] = None

class GenerateResult(BaseModel):
    """Aggregate response of POST /summarize; partial is True if any model failed."""
    success: bool = True
    partial: bool
    results: List[SummaryResult]

class StoredSummaryOut(BaseModel):
    """Summary row as returned by GET /summaries."""
    id: str
    content: str
    modelUsed: str
    prompt: str
    temperature: float
    createdAt: dt.datetime
