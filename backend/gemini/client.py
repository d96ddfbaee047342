"""
Gemini chat client for the move relay.

Each game gets its own Gemini chat so the model keeps strategic context
across moves. The relay never touches the SDK directly: it only sees a
ChatHandle, which GeminiChat implements on top of google-genai's async
chat sessions.

Edge cases handled:
  - Missing / blank API key (factory is None, service degrades)
  - Client construction failure (logged, factory is None)
  - Safety-blocked or empty responses (response.text is None or raises)
  - Text only present on candidate parts, not on response.text
"""

import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types

from gemini.config import get_api_key, get_model, get_temperature
from gemini.system_prompt import render_system_prompt

logger = logging.getLogger(__name__)


class EmptyReplyError(RuntimeError):
    """Gemini answered without any usable text."""


class ChatHandle(Protocol):
    """The one capability the relay needs from a conversational context."""

    async def send_message(self, text: str) -> str:
        ...


# ─── Response extractor ───────────────────────────────────────────────

def _extract_text(response) -> str:
    """
    Pull the reply text out of a Gemini response, handling:
      - Normal text responses
      - Blocked responses (response.text is None or raises ValueError)
      - Text that only shows up on candidate parts

    Raises EmptyReplyError if nothing usable is found.
    """
    try:
        text = response.text
        if text and text.strip():
            return text
    except (ValueError, AttributeError):
        pass

    try:
        for candidate in response.candidates or []:
            if candidate.content and candidate.content.parts:
                for part in candidate.content.parts:
                    if getattr(part, "text", None) and part.text.strip():
                        return part.text
    except (AttributeError, TypeError):
        pass

    block_reason = None
    try:
        feedback = response.prompt_feedback
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
    except AttributeError:
        pass

    if block_reason:
        raise EmptyReplyError(f"Gemini blocked the prompt: {block_reason}")
    raise EmptyReplyError("Gemini returned an empty response")


# ─── Chat handle ──────────────────────────────────────────────────────

class GeminiChat:
    """A single game's Gemini conversation."""

    def __init__(self, chat):
        self._chat = chat

    async def send_message(self, text: str) -> str:
        response = await self._chat.send_message(text)
        return _extract_text(response)


class GeminiChatFactory:
    """
    Builds a fresh GeminiChat for a new game.

    Called as factory(color); the color is baked into the system
    instruction, so a chat never changes sides.
    """

    def __init__(self, client: genai.Client, model: str, temperature: float):
        self.client = client
        self.model = model
        self.temperature = temperature

    def __call__(self, color: str) -> GeminiChat:
        chat = self.client.aio.chats.create(
            model=self.model,
            config=types.GenerateContentConfig(
                system_instruction=render_system_prompt(color),
                temperature=self.temperature,
            ),
        )
        return GeminiChat(chat)


# ─── Startup ──────────────────────────────────────────────────────────

def build_chat_factory(api_key: Optional[str] = None) -> Optional[GeminiChatFactory]:
    """
    Configure the Gemini client once at startup.

    Returns None when no API key is set or the client cannot be built;
    callers treat None as "not configured" and keep serving status and
    error routes.
    """
    api_key = api_key or get_api_key()
    if not api_key:
        logger.error("GEMINI_API_KEY is not set; move requests will fail with a configuration error")
        return None

    try:
        client = genai.Client(api_key=api_key)
    except Exception:
        logger.exception("Failed to configure the Gemini client")
        return None

    model = get_model()
    temperature = get_temperature()
    logger.info("Gemini client configured: model=%s temperature=%s", model, temperature)
    return GeminiChatFactory(client, model=model, temperature=temperature)
