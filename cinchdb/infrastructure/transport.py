"""
HTTP transport for the CinchDB client.

The client only needs one capability from the network: GET a URL and return
the response body as text. `Transport` describes that capability so callers
can inject their own; `HttpxTransport` is the default implementation built on
a lazily-created `httpx.AsyncClient` with explicit lifecycle management.

Every failure (connection error, timeout, non-2xx status) is raised as
`TransportError`. Nothing here retries.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, Protocol, runtime_checkable

import httpx

from cinchdb.config import get_settings
from cinchdb.errors import TransportError
from cinchdb.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything that can fetch a URL and return its body as text."""

    async def fetch_text(self, url: str) -> str:
        """
        Issue one GET request and return the full response body.

        Raises
        ------
        TransportError
            If the request does not complete with a 2xx status.
        """
        ...


class CallableTransport:
    """
    Adapt a plain `async def fetch(url) -> str` function to `Transport`.

    Anything the function raises, timeouts included, surfaces as `TransportError`.
    """

    def __init__(self, fetch: Callable[[str], Awaitable[str]]) -> None:
        self._fetch = fetch

    async def fetch_text(self, url: str) -> str:
        try:
            return await self._fetch(url)
        except TransportError:
            raise
        except Exception as exc:
            raise TransportError(f"Request failed: {exc.__class__.__name__}", url=url) from exc


class HttpxTransport:
    """
    Transport backed by `httpx.AsyncClient`.

    The underlying client is created on first use and released by `aclose()`
    or by leaving the `async with` block. A client passed in by the caller is
    never closed here.

    Example
    -------
        async with HttpxTransport(timeout=10) as transport:
            body = await transport.fetch_text("https://cinchdb.com/generatekey.php")
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else get_settings().http_timeout_seconds
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def fetch_text(self, url: str) -> str:
        client = self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Server answered {exc.response.status_code}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request failed: {exc.__class__.__name__}", url=url) from exc
        log.debug(
            "GET complete",
            extra={"status": response.status_code, "bytes": len(response.content)},
        )
        return response.text

    async def aclose(self) -> None:
        """Close the managed client, if this transport created one."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["Transport", "CallableTransport", "HttpxTransport"]
