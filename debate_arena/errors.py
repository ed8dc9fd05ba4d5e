"""Domain errors raised by services and the store."""

from __future__ import annotations


class DebateArenaError(Exception):
    """Base error carrying the HTTP status the API answers with."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(DebateArenaError):
    """Missing or malformed required field."""

    status_code = 400
    default_message = "Invalid request"


class NotFound(DebateArenaError):
    """Referenced debate or joined record does not exist."""

    status_code = 404
    default_message = "Resource not found"


class StoreFailure(DebateArenaError):
    """Underlying persistence error, including connectivity loss."""

    status_code = 500


__all__ = ["DebateArenaError", "InvalidArgument", "NotFound", "StoreFailure"]
