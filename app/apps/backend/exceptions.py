"""
Errors raised while talking to the upstream backend API
"""
from typing import Any, Optional


class BackendAPIError(Exception):
    """Base class for every upstream failure."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class BackendTransportError(BackendAPIError):
    """The request never produced a response (connection refused, DNS, timeout)."""


class BackendDecodeError(BackendAPIError):
    """The upstream answered but the body was not valid JSON."""


class BackendStatusError(BackendAPIError):
    """The upstream answered with a non-success status code."""


class BackendAuthError(BackendStatusError):
    """The upstream rejected the admin credential (401/403)."""
