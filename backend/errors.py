"""
Error taxonomy for the move relay.

Every failure the relay can produce maps to exactly one of these, and
main.py turns them into JSON responses with a single exception handler.
"""

from typing import Optional


class RelayError(Exception):
    status_code: int = 500
    error: str = "relay error"

    def to_content(self) -> dict:
        return {"error": self.error}


class MissingParameter(RelayError):
    """A required request field was absent or blank."""

    status_code = 400
    error = "missing parameter"

    def __init__(self, field: Optional[str] = None):
        self.field = field
        super().__init__(f"missing parameter: {field}" if field else self.error)


class InvalidParameter(RelayError):
    """A request field was present but had the wrong type."""

    status_code = 400
    error = "invalid parameter"

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"invalid parameter: {', '.join(fields)}")

    def to_content(self) -> dict:
        return {"error": self.error, "details": ", ".join(self.fields)}


class ServiceUnavailable(RelayError):
    """The Gemini client was never configured (missing or rejected API key)."""

    status_code = 500
    error = "configuration error"

    def __init__(self, message: str = "Gemini client is not configured"):
        super().__init__(message)


class UpstreamFailure(RelayError):
    """The Gemini call failed or returned nothing usable."""

    status_code = 500
    error = "upstream failure"

    def __init__(self, details: str):
        self.details = details
        super().__init__(details)

    def to_content(self) -> dict:
        return {"error": self.error, "details": self.details}


class SessionNotFound(RelayError):
    status_code = 404
    error = "session not found"

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"session {session_id!r} not found")

    def to_content(self) -> dict:
        return {"message": self.error}
