# app/api/v1/routers/models.py
from fastapi import APIRouter
from app.config import AVAILABLE_MODELS, DEFAULT_PROMPT, DEFAULT_TEMPERATURE

router = APIRouter(prefix="/models", tags=["models"])

@router.get("")
async def get_models():
    """
    Get the summarization model catalogue and form defaults.

    Returns:
        dict: Response containing:
            - success: bool (always True)
            - data: dict with:
                - models: list of {"id", "label"} (label is the short display name)
                - defaultPrompt: str
                - defaultTemperature: float
    """
    return {"success": True, "data": {
        "models": [{"id": m, "label": display_name(m)} for m in AVAILABLE_MODELS],
        "defaultPrompt": DEFAULT_PROMPT,
        "defaultTemperature": DEFAULT_TEMPERATURE,
    }}

def display_name(model: str) -> str:
    """'meta-llama/llama-4-scout:free' -> 'llama-4-scout'"""
    if "/" not in model:
        return model
    return model.split("/", 1)[1].split(":", 1)[0]
