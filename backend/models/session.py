from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class GameSession(BaseModel):
    session_id: str
    color: str
    chat: Any           # ChatHandle, owned by the Gemini client
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    moves: int = 0      # successful replies in this conversation
