"""Error types raised by the summarization and speech services."""


class ModelCallError(Exception):
    """
    One failed completion call.

    code is machine-readable and stable; message is for humans and comes from the
    provider's error body when it has one.
    """

    RATE_LIMIT = "RATE_LIMIT"
    SERVER_ERROR = "SERVER_ERROR"
    API_ERROR = "API_ERROR"
    NO_CONTENT = "NO_CONTENT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ConfigurationError(Exception):
    """A required credential or setting is missing; the whole request fails."""


class TranscriptNotFoundError(Exception):
    def __init__(self, transcript_id: str):
        super().__init__(f"Transcript not found: {transcript_id}")
        self.transcript_id = transcript_id


class TTSError(Exception):
    """Speech provider returned an error or an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
