"""Error taxonomy surfaced by interview session operations."""
from __future__ import annotations


class InterviewError(Exception):
    """Base class for client-visible session errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InterviewError):
    """Missing or malformed request fields."""

    status_code = 400


class NotFoundError(InterviewError):
    """Unknown session identifier."""

    status_code = 404


class InvalidStateError(InterviewError):
    """Operation not allowed in the session's current state."""

    status_code = 400


class ConfigurationError(InterviewError):
    """Model credential is not configured."""

    status_code = 500


__all__ = [
    "ConfigurationError",
    "InterviewError",
    "InvalidStateError",
    "NotFoundError",
    "ValidationError",
]
