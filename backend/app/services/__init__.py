"""
Services Module

Provides interfaces for external services:
- Completion (summaries): OpenRouter chat completions
- TTS (Text-to-Speech): ElevenLabs
"""

from .errors import (
    ConfigurationError,
    ModelCallError,
    TranscriptNotFoundError,
    TTSError,
)

# Summaries
from .openrouter import OpenRouterClient
from .summarizer import SummarizationService, find_transcript

# TTS service
from .tts_elevenlabs import ElevenLabsClient

__all__ = [
    "ConfigurationError",
    "ModelCallError",
    "TranscriptNotFoundError",
    "TTSError",
    "OpenRouterClient",
    "SummarizationService",
    "find_transcript",
    "ElevenLabsClient",
]
