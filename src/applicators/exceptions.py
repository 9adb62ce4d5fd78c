"""Exceptions raised by the Mysolution client."""

from typing import Any, Optional


class MysolutionError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(MysolutionError):
    """Raised when required configuration is missing or unreadable."""


class TokenAcquisitionError(MysolutionError):
    """
    Raised when the client-credentials exchange fails.

    Attributes:
        message: Error description
        status: HTTP status of the token response, if one was received
        body: Remote error body, if one was received
    """

    def __init__(self, message: str, status: Optional[int] = None, body: Any = None):
        self.message = message
        self.status = status
        self.body = body

        parts = [message]
        if status is not None:
            parts.append(f"(HTTP {status})")
        if body:
            parts.append(f": {body}")
        super().__init__(" ".join(parts))
