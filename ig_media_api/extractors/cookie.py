"""
Instagram cookie-authenticated fetcher.

Requests the post page with the `__a=1&__d=dis` switches, which makes
Instagram answer with the private-API JSON document instead of HTML.
Needs a logged-in session cookie, taken from the request or, failing
that, from the server configuration.

Common upstream answers: 403 (bad or expired cookie), 429 (rate limited),
200 with a login page (expired session, surfaces as 404 here).
"""

import json
import logging
from typing import Any

from ..models.enums import Strategy
from ..models.response import CarouselItem, NormalizedMedia
from ..utils.helpers import (
    bool_or_none,
    dict_or_none,
    float_or_none,
    int_or_none,
    list_or_none,
    str_or_none,
    text_or_none,
    traverse_obj,
)
from .base import INSTAGRAM_BASE_URL, NOT_FOUND_MESSAGE, BaseFetcher, FetchError

logger = logging.getLogger(__name__)

MISSING_COOKIE_MESSAGE = (
    "Missing cookie. Set env COOKIE or pass `cookieOverride`/`x-ig-cookie` header."
)

_CAROUSEL_PRODUCT_TYPE = "carousel_container"


def _parse_carousel(node: dict) -> list[CarouselItem] | None:
    """Map carousel children, or None when the node is not a carousel."""
    children = traverse_obj(node, "carousel_media")
    if traverse_obj(node, "product_type") != _CAROUSEL_PRODUCT_TYPE or not isinstance(children, list):
        return None

    return [
        CarouselItem(
            image_versions=list_or_none(traverse_obj(child, ("image_versions2", "candidates"))),
            video_versions=list_or_none(traverse_obj(child, "video_versions")),
        )
        for child in children
    ]


def _parse_video_versions(node: dict) -> list | None:
    """Explicit video variants, else a single-entry list for any video node."""
    versions = list_or_none(traverse_obj(node, "video_versions"))
    if versions is not None:
        return versions

    if not traverse_obj(node, "is_video"):
        return None
    # The entry carries no url key when the node has no video_url
    video_url = str_or_none(traverse_obj(node, "video_url"))
    return [{"url": video_url} if video_url else {}]


def normalize_cookie_media(node: dict) -> NormalizedMedia:
    """Project a private-API media item (or GraphQL fallback) into NormalizedMedia."""
    return NormalizedMedia(
        code=str_or_none(traverse_obj(node, "code")),
        created_at=int_or_none(traverse_obj(node, "taken_at")),
        username=str_or_none(
            traverse_obj(node, ("user", "username"), ("owner", "username"))
        ),
        full_name=str_or_none(traverse_obj(node, ("user", "full_name"))),
        profile_picture=str_or_none(traverse_obj(node, ("user", "profile_pic_url"))),
        is_verified=bool_or_none(traverse_obj(node, ("user", "is_verified"))),
        is_paid_partnership=bool_or_none(traverse_obj(node, "is_paid_partnership")),
        product_type=str_or_none(traverse_obj(node, "product_type")),
        caption=text_or_none(
            traverse_obj(
                node,
                ("caption", "text"),
                ("edge_media_to_caption", "edges", 0, "node", "text"),
            )
        ),
        like_count=int_or_none(
            traverse_obj(node, ("like_count",), ("edge_media_preview_like", "count"))
        ),
        comment_count=int_or_none(
            traverse_obj(node, ("comment_count",), ("edge_media_to_parent_comment", "count"))
        ),
        view_count=int_or_none(traverse_obj(node, "view_count", "play_count")),
        video_duration=float_or_none(traverse_obj(node, "video_duration")),
        location=dict_or_none(traverse_obj(node, "location")),
        height=int_or_none(traverse_obj(node, ("original_height",), ("dimensions", "height"))),
        width=int_or_none(traverse_obj(node, ("original_width",), ("dimensions", "width"))),
        image_versions=list_or_none(
            traverse_obj(node, ("image_versions2", "candidates"), ("display_resources",))
        ),
        video_versions=_parse_video_versions(node),
        carousel_media=_parse_carousel(node),
    )


class CookieFetcher(BaseFetcher):
    """Cookie-authenticated private-API strategy."""

    strategy = Strategy.COOKIE

    def _resolve_cookie(self, cookie: str | None) -> str:
        """Per-call override first, then the configured cookie."""
        resolved = (cookie or "").strip() or (self.settings.cookie or "").strip()
        if not resolved:
            raise FetchError(MISSING_COOKIE_MESSAGE, status=400)
        return resolved

    def _build_headers(self, cookie: str) -> dict[str, str]:
        return {
            "Cookie": cookie,
            "User-Agent": self.settings.user_agent,
            "X-IG-App-ID": self.settings.x_ig_app_id,
            "Sec-Fetch-Site": "same-origin",
            "Accept": "application/json, text/plain, */*",
        }

    @staticmethod
    def _describe_document(document: Any) -> str | None:
        """Top-level keys of a parsed document, for debugging shape drift."""
        if isinstance(document, dict):
            return json.dumps(list(document.keys()), separators=(",", ":"))
        return None

    async def _fetch(self, shortcode: str, cookie: str | None) -> NormalizedMedia:
        session_cookie = self._resolve_cookie(cookie)

        logger.info("Fetching %s via cookie-authenticated API", shortcode)
        response = await self.http.get(
            f"{INSTAGRAM_BASE_URL}/p/{shortcode}",
            params={"__a": "1", "__d": "dis"},
            headers=self._build_headers(session_cookie),
        )
        self._raise_for_status(response, session_cookie)

        document = self._parse_json(response)
        node = dict_or_none(
            traverse_obj(document, ("items", 0), ("graphql", "shortcode_media"))
        )
        if node is None:
            raise FetchError(NOT_FOUND_MESSAGE, status=404, details=self._describe_document(document))

        return normalize_cookie_media(node)
