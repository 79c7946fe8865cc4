"""
Upstream fetch strategies.

Each fetcher handles URL matching, the upstream request and normalization
of the upstream document for one retrieval strategy. All of them expose the
same `fetch(url, cookie=None)` coroutine returning a ResultEnvelope.
"""

from ..config import Settings
from ..core.http_client import HTTPClient
from ..models.enums import Strategy
from .base import BaseFetcher, FetchError
from .cookie import CookieFetcher, normalize_cookie_media
from .graphql import GraphqlFetcher, normalize_graphql_media

_FETCHER_MAP: dict[Strategy, type[BaseFetcher]] = {
    Strategy.GRAPHQL: GraphqlFetcher,
    Strategy.COOKIE: CookieFetcher,
}


def get_fetcher(
    strategy: Strategy,
    settings: Settings | None = None,
    http: HTTPClient | None = None,
) -> BaseFetcher:
    """Get a fetcher instance for the given strategy."""
    fetcher_class = _FETCHER_MAP.get(strategy)
    if fetcher_class is None:
        raise ValueError(f"No fetcher available for strategy: {strategy}")

    return fetcher_class(settings=settings, http=http)


__all__ = [
    "BaseFetcher",
    "CookieFetcher",
    "FetchError",
    "GraphqlFetcher",
    "get_fetcher",
    "normalize_cookie_media",
    "normalize_graphql_media",
]
