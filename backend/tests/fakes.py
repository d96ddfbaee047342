"""
Fakes for the Gemini chat layer. No network, no API key.
"""

import itertools
import threading
import time


class FakeChat:
    """Stands in for a GeminiChat: replays canned replies, records prompts."""

    _ids = itertools.count(1)

    def __init__(self, color: str, replies=None, error: Exception = None):
        self.id = next(self._ids)
        self.color = color
        self.replies = list(replies or [" E2E4 "])
        self.error = error
        self.prompts: list[str] = []

    async def send_message(self, text: str) -> str:
        self.prompts.append(text)
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


class FakeFactory:
    """factory(color) -> FakeChat, counting every chat it builds."""

    def __init__(self, replies=None, error: Exception = None, delay: float = 0.0):
        self.replies = replies
        self.error = error
        self.delay = delay
        self.created: list[FakeChat] = []
        self._lock = threading.Lock()

    def __call__(self, color: str) -> FakeChat:
        if self.delay:
            time.sleep(self.delay)
        chat = FakeChat(color, replies=self.replies, error=self.error)
        with self._lock:
            self.created.append(chat)
        return chat


