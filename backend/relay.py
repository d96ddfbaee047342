"""
Move relay: position in, Gemini's move out.

The relay validates the request, fetches (or lazily creates) the game's
chat from the SessionStore, sends the move prompt, and normalizes the
reply. It does not know or check chess rules; whatever text Gemini
returns is passed back trimmed and lowercased.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from errors import MissingParameter, ServiceUnavailable, SessionNotFound, UpstreamFailure
from gemini.system_prompt import render_move_prompt
from store import ChatFactory, SessionStore

logger = logging.getLogger(__name__)


@contextmanager
def evict_on_failure(store: SessionStore, session_id: str):
    """
    Drop the session if the wrapped upstream call fails.

    A failed exchange may leave the provider-side history half-written,
    so the next request for this game starts a fresh chat. The error is
    re-raised as UpstreamFailure.
    """
    try:
        yield
    except Exception as exc:
        store.remove(session_id)
        raise UpstreamFailure(str(exc) or type(exc).__name__) from exc


def _require(**fields: Optional[str]) -> None:
    for name, value in fields.items():
        if not value:
            raise MissingParameter(name)


class MoveRelay:
    def __init__(self, store: SessionStore, chat_factory: Optional[ChatFactory] = None):
        self.store = store
        self.chat_factory = chat_factory

    @property
    def ready(self) -> bool:
        return self.chat_factory is not None

    async def request_move(
        self,
        fen: Optional[str],
        color: Optional[str],
        session_id: Optional[str],
    ) -> str:
        _require(fen=fen, color=color, sessionId=session_id)
        if not self.ready:
            raise ServiceUnavailable()

        prompt = render_move_prompt(fen)
        logger.info("session_id=%s | requesting move for %s", session_id, color)

        with evict_on_failure(self.store, session_id):
            chat = self.store.get_or_create(session_id, color, factory=self.chat_factory)
            try:
                reply = await chat.send_message(prompt)
            except Exception:
                logger.exception("Gemini API call failed: session_id=%s", session_id)
                raise

        move = reply.strip().lower()
        self.store.record_move(session_id)
        logger.info("session_id=%s | Gemini replied: %s", session_id, move)
        return move

    def end_game(self, session_id: Optional[str]) -> None:
        # No id means nothing to remove: a 404, same as an unknown id.
        if not session_id or not self.store.remove(session_id):
            raise SessionNotFound(session_id or "")
