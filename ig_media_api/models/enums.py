from enum import Enum


class Strategy(str, Enum):
    """Upstream retrieval strategy."""

    GRAPHQL = "graphql"
    COOKIE = "cookie"


class MediaKind(str, Enum):
    """Path segment that introduces the shortcode in an Instagram URL."""

    POST = "p"
    REEL = "reel"
    REELS = "reels"
    STORIES = "stories"
