"""
Pydantic schemas for transcript endpoints.
"""
import datetime as dt
from pydantic import BaseModel

class TranscriptOut(BaseModel):
    """A stored voice-note transcript."""
    id: str
    title: str
    content: str
    createdAt: dt.datetime

class SeedTranscript(BaseModel):
    """One entry of the transcripts seed file."""
    title: str
    content: str
