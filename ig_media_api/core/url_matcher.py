"""
URL pattern matching to extract Instagram shortcodes.

The pattern is searched for anywhere in the input rather than anchored to
the start, so full URLs, scheme-less URLs and URLs carrying query strings
or a leading username segment all resolve to the same shortcode.
"""

import logging
import re

from ..models.enums import MediaKind

logger = logging.getLogger(__name__)

# instagram.com/[username/](p|reel|reels|stories)/<shortcode>
_SHORTCODE_PATTERN = re.compile(
    r"instagram\.com/(?:[A-Za-z0-9_.]+/)?(?P<kind>p|reels?|stories)/(?P<id>[A-Za-z0-9\-_]+)"
)


class MatchResult:
    """Result of a URL match."""

    def __init__(self, kind: MediaKind, media_id: str, original_url: str):
        self.kind = kind
        self.media_id = media_id
        self.original_url = original_url

    def __repr__(self) -> str:
        return f"MatchResult(kind={self.kind!r}, media_id={self.media_id!r})"


def match_url(url: str) -> MatchResult | None:
    """
    Match an Instagram URL and return the path kind and shortcode.

    Returns None when no post/reel/story segment is present. Never raises,
    including for non-string input.
    """
    if not isinstance(url, str) or not url:
        return None

    match = _SHORTCODE_PATTERN.search(url)
    if match is None:
        logger.debug("No shortcode found in %r", url[:200])
        return None

    return MatchResult(kind=MediaKind(match.group("kind")), media_id=match.group("id"), original_url=url)


def extract_shortcode(url: str) -> str | None:
    """Return the shortcode embedded in an Instagram URL, or None."""
    result = match_url(url)
    return result.media_id if result else None
