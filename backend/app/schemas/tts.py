"""
Pydantic schemas for speech synthesis endpoints.
"""
from typing import Optional
from pydantic import BaseModel

class TtsRequest(BaseModel):
    text: str
    voiceId: Optional[str] = None  # Falls back to settings.default_voice_id

class VoiceOut(BaseModel):
    voice_id: str
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
