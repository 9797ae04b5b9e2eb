"""Error types raised by the Todoist client.

Every failure leaving the client is a :class:`TodoistError`.  Callers that
only care whether a call worked can catch the base class; callers that want
to tell a bad setup from a bad argument from a failed request catch one of
the three subclasses.
"""
from __future__ import annotations

from typing import Any, Final, Optional

__all__: Final = ["TodoistError", "ConfigurationError", "ValidationError", "ApiError"]


class TodoistError(Exception):
    """Base class for all client errors.

    ``cause`` holds whatever triggered the failure: an exception, or the raw
    JSON payload returned by the API.
    """

    def __init__(self, message: str, cause: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(TodoistError):
    """Raised when the client cannot be constructed (e.g. no API key)."""


class ValidationError(TodoistError):
    """Raised before any request is sent when a required input is missing."""


class ApiError(TodoistError):
    """Raised when the API reports a failure or the request itself fails."""

    def __init__(
        self,
        message: str,
        cause: Optional[Any] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code
