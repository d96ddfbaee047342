from typing import Optional

from fastapi import APIRouter, Body, Request
from pydantic import BaseModel

router = APIRouter(tags=["game"])


class EndGameRequest(BaseModel):
    sessionId: Optional[str] = None


@router.post("/end-game")
@router.post("/api/fim-partida", include_in_schema=False)
async def end_game(request: Request, body: Optional[EndGameRequest] = Body(default=None)):
    """
    Drops the game's Gemini chat (checkmate, draw, resignation).
    Returns 404 if the session was never started or is already gone.
    """
    session_id = body.sessionId if body else None
    request.app.state.relay.end_game(session_id)
    return {"message": "session removed"}
