"""Core utilities: HTTP transport and URL matching."""

from .http_client import HTTPClient
from .url_matcher import MatchResult, extract_shortcode, match_url

__all__ = [
    "HTTPClient",
    "MatchResult",
    "extract_shortcode",
    "match_url",
]
