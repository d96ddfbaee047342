"""
Gemini configuration.

Everything is read from the process environment (populated from .env by
main.py before this module is imported):
  GEMINI_API_KEY       credential (legacy name API_KEY_GEMINI also accepted)
  GEMINI_MODEL         chat model, e.g. GEMINI_MODEL=gemini-2.5-pro
  GEMINI_TEMPERATURE   sampling temperature for every game chat
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.1

_API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY_GEMINI")


def get_api_key() -> Optional[str]:
    """First non-blank key among the supported variable names, else None."""
    for name in _API_KEY_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def get_model() -> str:
    return os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL


def get_temperature() -> float:
    raw = os.environ.get("GEMINI_TEMPERATURE", "").strip()
    if not raw:
        return DEFAULT_TEMPERATURE
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid GEMINI_TEMPERATURE=%r, using %s", raw, DEFAULT_TEMPERATURE
        )
        return DEFAULT_TEMPERATURE
