from fastapi import APIRouter, Depends, HTTPException, status
from app.api.v1.deps import get_current_user
from app.models.transcript import Transcript
from app.models.user import User
from app.schemas.transcript import TranscriptOut
from app.services.summarizer import find_transcript

router = APIRouter(prefix="/transcripts", tags=["transcripts"])

def _transcript_out(t: Transcript) -> dict:
    return TranscriptOut(id=str(t.id), title=t.title, content=t.content, createdAt=t.created_at).model_dump(mode="json")

@router.get("")
async def list_transcripts(user: User = Depends(get_current_user)):
    """
    List every stored transcript, newest first.

    Returns:
        dict: {"success": True, "transcripts": [{id, title, content, createdAt}, ...]}
    """
    rows = await Transcript.all().order_by("-created_at")
    return {"success": True, "transcripts": [_transcript_out(t) for t in rows]}

@router.get("/{tid}")
async def get_transcript(tid: str, user: User = Depends(get_current_user)):
    """
    Get one transcript.

    Raises:
        HTTPException (404): If the transcript doesn't exist
    """
    t = await find_transcript(tid)
    if not t:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail={"code": "NOT_FOUND", "message": "Transcript not found"})
    return {"success": True, "transcript": _transcript_out(t)}
