from typing import Optional

from fastapi import APIRouter, Body, Request
from pydantic import AliasChoices, BaseModel, Field

router = APIRouter(tags=["move"])


# ---------- Request / Response schemas ----------

class MoveRequest(BaseModel):
    # All optional so a missing field gets our 400, not FastAPI's 422.
    fen: Optional[str] = None
    color: Optional[str] = Field(default=None, validation_alias=AliasChoices("color", "cor_ia"))
    sessionId: Optional[str] = None


class MoveResponse(BaseModel):
    movimento: str


# ---------- Endpoint ----------

@router.post("/move", response_model=MoveResponse)
@router.post("/api/jogada-ia", response_model=MoveResponse, include_in_schema=False)
async def request_move(request: Request, body: Optional[MoveRequest] = Body(default=None)):
    """
    Asks the game's Gemini chat for its next move.
    The chat is created on the first move of a session and reused afterwards.
    """
    body = body or MoveRequest()
    movimento = await request.app.state.relay.request_move(
        fen=body.fen,
        color=body.color,
        session_id=body.sessionId,
    )
    return MoveResponse(movimento=movimento)
