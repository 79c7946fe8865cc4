"""
Async HTTP client wrapper around httpx.AsyncClient.

Every call issues exactly one request: there is no retry or back-off
layer, a failed upstream call is surfaced to the caller as-is. Timeouts
come from the configured transport timeout only.

Headers:
- No browser impersonation headers are added by default; each fetcher
  sends exactly the headers its upstream contract requires.
- Per-request headers are passed via the `headers` kwarg.
"""

import logging
from typing import Any

import httpx

from ..config import get_settings

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Async HTTP client with configurable default headers. Wraps
    httpx.AsyncClient and creates it lazily on first use.
    """

    def __init__(
        self,
        timeout: int | None = None,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout or get_settings().request_timeout
        self._follow_redirects = follow_redirects
        self._default_headers: dict[str, str] = dict(headers) if headers else {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self._timeout,
                    connect=10.0,
                    read=self._timeout,
                    write=10.0,
                    pool=10.0,
                ),
                follow_redirects=self._follow_redirects,
                headers=self._default_headers,
                http2=self._transport is None,
                transport=self._transport,
                limits=httpx.Limits(
                    max_connections=50,
                    max_keepalive_connections=10,
                    keepalive_expiry=30.0,
                ),
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------
    # Core request
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        data: Any = None,
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Transport errors (httpx.HTTPError subclasses) propagate unchanged.
        """
        client = await self._get_client()
        response = await client.request(method, url, headers=headers, params=params, data=data)
        logger.debug("%s %s -> HTTP %d", method, url, response.status_code)
        return response

    # ------------------------------------------------------------------
    # Convenience methods
    # ------------------------------------------------------------------

    async def get(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()
