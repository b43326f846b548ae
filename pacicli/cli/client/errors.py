"""Exception hierarchy for API client errors.

This module defines the exceptions raised by PaciClient, carrying the
HTTP status code and response details where there is one.
"""

from typing import Any, Optional


class CLIClientError(Exception):
    """Base exception for API client errors.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status code if applicable, None otherwise.
        details: Additional error context as a dictionary.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ConnectionError(CLIClientError):
    """Failed to connect to the API server."""

    pass


class TimeoutError(CLIClientError):
    """Request timed out."""

    pass


class APIError(CLIClientError):
    """API answered with a status the command does not accept.

    The message is the response body, which is where the API puts its
    error text.
    """

    def __str__(self) -> str:
        return self.message

    def verbose_str(self) -> str:
        """Return the error message with the status code appended."""
        if self.status_code is not None:
            return f"{self.message} ({self.status_code})"
        return self.message
