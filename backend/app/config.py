# app/config.py
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

# Models offered in the dashboard (OpenRouter identifiers)
AVAILABLE_MODELS = [
    "meta-llama/llama-4-scout:free",
    "openai/gpt-oss-20b:free",
    "z-ai/glm-4.5-air:free",
]

DEFAULT_PROMPT = (
    "Please provide a concise summary of this voice note, "
    "highlighting the key points and main topics discussed."
)

DEFAULT_TEMPERATURE = 0.3

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = Field(default_factory=lambda: os.getenv("APP_NAME", "Voice Note Summarizer API"))
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend, comma separated in CORS_ORIGINS
    CORS_ORIGINS: list[str] = Field(default_factory=_cors_origins)

    # Sent to OpenRouter as HTTP-Referer
    app_url: str = os.getenv("APP_URL", "http://localhost:3000")
    app_title: str = os.getenv("APP_TITLE", "Voice Note Summarizer")

    # OpenRouter (chat completions) settings
    openrouter_api_key: str | None = os.getenv("OPENROUTER_API_KEY")
    openrouter_api_url: str = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1/chat/completions")
    summary_max_tokens: int = int(os.getenv("SUMMARY_MAX_TOKENS", "500"))
    summarize_concurrency: int = int(os.getenv("SUMMARIZE_CONCURRENCY", "2"))
    summarize_timeout_seconds: float = float(os.getenv("SUMMARIZE_TIMEOUT_SECONDS", "45"))

    # ElevenLabs API Settings (for TTS)
    eleven_api_key: str | None = os.getenv("ELEVENLABS_API_KEY")
    eleven_api_base: str = os.getenv("ELEVENLABS_API_URL", "https://api.elevenlabs.io/v1")
    default_voice_id: str = os.getenv("DEFAULT_VOICE_ID", "JBFqnCBsd6RMkjVDRZzb")
    eleven_model_id: str = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2")
    eleven_output_format: str = os.getenv("ELEVENLABS_OUTPUT_FORMAT", "mp3_44100_128")
    tts_max_chars: int = int(os.getenv("TTS_MAX_CHARS", "5000"))

    # JSON array of {"title", "content"} loaded at startup (optional)
    transcripts_seed_path: str | None = os.getenv("TRANSCRIPTS_SEED_PATH")

settings = Settings()  # Instantiate configuration
