"""
In-memory session store: one Gemini chat per game.

Sessions live in a plain dict owned by a SessionStore instance (one per
app, see main.create_app). Nothing survives a restart and nothing is
evicted except by remove().
"""

import logging
import threading
from typing import Callable, Optional

from errors import ServiceUnavailable
from gemini.client import ChatHandle
from models.session import GameSession

logger = logging.getLogger(__name__)

ChatFactory = Callable[[str], ChatHandle]


class SessionStore:
    def __init__(self, chat_factory: Optional[ChatFactory] = None):
        self.chat_factory = chat_factory
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()   # guards _sessions

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def get_or_create(
        self,
        session_id: str,
        color: str,
        factory: Optional[ChatFactory] = None,
    ) -> ChatHandle:
        """
        Return the chat for session_id, creating it on first use.

        The check, the factory call and the insert happen under one lock,
        so concurrent first requests for the same game all get the same
        handle. Building a chat makes no network call. An existing session
        keeps its original color.
        """
        with self._lock:
            existing = self._sessions.get(session_id)
            if existing is not None:
                return existing.chat

            factory = factory or self.chat_factory
            if factory is None:
                raise ServiceUnavailable()

            chat = factory(color)
            self._sessions[session_id] = GameSession(
                session_id=session_id, color=color, chat=chat
            )
            logger.info("New chat session created: session_id=%s color=%s", session_id, color)
            return chat

    def record_move(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                session.moves += 1

    def remove(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info("Chat session removed: session_id=%s moves=%d", session_id, session.moves)
        return True

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
