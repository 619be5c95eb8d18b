"""
Error types raised by the CinchDB client.

Transport failures are surfaced as one generic `TransportError`; the client
never retries and does not distinguish causes beyond the optional status code.
Misuse of the query vocabulary fails fast with `QueryValidationError` when a
request is built, instead of sending a sentinel token to the server.
"""

from __future__ import annotations

from typing import Optional


class CinchDBError(Exception):
    """Base class for all client errors."""


class TransportError(CinchDBError):
    """The remote call could not be completed (unreachable, timeout, non-2xx)."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class QueryValidationError(CinchDBError, ValueError):
    """A request could not be built from the supplied query."""


__all__ = ["CinchDBError", "TransportError", "QueryValidationError"]
