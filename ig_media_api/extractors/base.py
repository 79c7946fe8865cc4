"""
Base fetcher class that both upstream strategies inherit from.

A fetcher turns an Instagram URL into a ResultEnvelope. Expected failures
(invalid URL, missing credential, upstream non-success, shape drift) are
raised internally as FetchError and returned as an ErrorEnvelope, so the
public fetch() never raises for them. Transport failures (httpx errors)
propagate to the caller.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..config import Settings, get_settings
from ..core.http_client import HTTPClient
from ..core.url_matcher import extract_shortcode
from ..models.enums import Strategy
from ..models.response import ErrorEnvelope, NormalizedMedia, ResultEnvelope, SuccessEnvelope
from ..utils.helpers import redact, truncate

logger = logging.getLogger(__name__)

INSTAGRAM_BASE_URL = "https://www.instagram.com"

NOT_FOUND_MESSAGE = "Media not found or response shape changed."


class FetchError(Exception):
    """Raised when a fetch fails in an expected way."""

    def __init__(self, message: str, status: int, details: str | None = None):
        super().__init__(message)
        self.status = status
        self.details = details


class BaseFetcher(ABC):
    """
    Abstract base class for the upstream strategies.

    Subclasses must implement:
    - strategy: The Strategy enum value
    - _fetch(): request the media node for a shortcode and normalize it

    Settings are injected at construction; get_settings() is only the
    default. An HTTPClient passed in is shared and left open, one created
    here is closed after each fetch.
    """

    strategy: Strategy

    def __init__(self, settings: Settings | None = None, http: HTTPClient | None = None):
        self.settings = settings or get_settings()
        self._http = http
        self._owns_http = http is None

    @property
    def http(self) -> HTTPClient:
        """Lazy-initialized HTTP client."""
        if self._http is None:
            self._http = HTTPClient(timeout=self.settings.request_timeout)
        return self._http

    async def close(self):
        """Clean up an HTTP client created by this fetcher."""
        if self._owns_http and self._http:
            await self._http.close()
            self._http = None

    async def fetch(self, url: str, cookie: str | None = None) -> ResultEnvelope:
        """
        Main entry point: extract the shortcode, query upstream, normalize.

        Args:
            url: Instagram post, reel or story URL
            cookie: Optional per-call credential (ignored by strategies that
                send none)
        """
        shortcode = extract_shortcode(url)
        if not shortcode:
            return ErrorEnvelope(status=400, error="Invalid Instagram URL.")

        try:
            media = await self._fetch(shortcode, cookie)
            return SuccessEnvelope(data=media)
        except FetchError as e:
            logger.warning(
                "%s fetch for %s failed with status %d: %s",
                self.strategy.value,
                shortcode,
                e.status,
                e,
            )
            return ErrorEnvelope(status=e.status, error=str(e), details=e.details)
        finally:
            await self.close()

    @abstractmethod
    async def _fetch(self, shortcode: str, cookie: str | None) -> NormalizedMedia:
        """
        Perform the strategy-specific request and normalization.

        Raises FetchError for expected failures.
        """
        ...

    # === Common utility methods ===

    @staticmethod
    def _raise_for_status(response: httpx.Response, *secrets: str | None):
        """Turn a non-success upstream response into a status passthrough."""
        if response.is_success:
            return
        raise FetchError(
            f"Instagram request failed ({response.status_code})",
            status=response.status_code,
            details=truncate(redact(response.text, *secrets)) or None,
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        """Parse the response body. Unparsable or empty bodies yield None."""
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Upstream body is not JSON (%d bytes)", len(response.content))
            return None
