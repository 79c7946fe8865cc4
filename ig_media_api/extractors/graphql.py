"""
Instagram anonymous GraphQL fetcher.

Queries the web GraphQL endpoint with a fixed document id and the
shortcode as the only variable. No session cookie is sent; the request
only carries the app id and the LSD / ASBD anti-automation tokens.
"""

import json
import logging
from typing import Any

from ..models.enums import Strategy
from ..models.response import NormalizedMedia
from ..utils.helpers import (
    bool_or_none,
    dict_or_none,
    float_or_none,
    int_or_none,
    list_or_none,
    str_or_none,
    text_or_none,
    traverse_obj,
    truncate,
)
from .base import INSTAGRAM_BASE_URL, NOT_FOUND_MESSAGE, BaseFetcher, FetchError

logger = logging.getLogger(__name__)

_GRAPHQL_URL = f"{INSTAGRAM_BASE_URL}/api/graphql"


def normalize_graphql_media(node: dict) -> NormalizedMedia:
    """Project a GraphQL xdt_shortcode_media node into NormalizedMedia."""
    owner = dict_or_none(traverse_obj(node, "owner"))
    dimensions = dict_or_none(traverse_obj(node, "dimensions"))
    shortcode = str_or_none(traverse_obj(node, "shortcode"))

    return NormalizedMedia(
        typename=str_or_none(traverse_obj(node, "__typename")),
        shortcode=shortcode,
        code=shortcode,
        product_type=str_or_none(traverse_obj(node, "product_type")),
        created_at=int_or_none(traverse_obj(node, "taken_at_timestamp")),
        owner=owner,
        username=str_or_none(traverse_obj(owner, "username")),
        full_name=str_or_none(traverse_obj(owner, "full_name")),
        profile_picture=str_or_none(traverse_obj(owner, "profile_pic_url")),
        is_verified=bool_or_none(traverse_obj(owner, "is_verified")),
        caption=text_or_none(
            traverse_obj(node, ("edge_media_to_caption", "edges", 0, "node", "text"))
        ),
        like_count=int_or_none(traverse_obj(node, ("edge_media_preview_like", "count"))),
        comment_count=int_or_none(
            traverse_obj(
                node,
                ("edge_media_to_parent_comment", "count"),
                ("edge_media_to_comment", "count"),
            )
        ),
        view_count=int_or_none(traverse_obj(node, "video_view_count", "video_play_count")),
        video_view_count=int_or_none(traverse_obj(node, "video_view_count")),
        video_play_count=int_or_none(traverse_obj(node, "video_play_count")),
        dimensions=dimensions,
        height=int_or_none(traverse_obj(dimensions, "height")),
        width=int_or_none(traverse_obj(dimensions, "width")),
        display_url=str_or_none(traverse_obj(node, "display_url")),
        display_resources=list_or_none(traverse_obj(node, "display_resources")),
        thumbnail_src=str_or_none(traverse_obj(node, "thumbnail_src")),
        video_url=str_or_none(traverse_obj(node, "video_url")),
        is_video=bool_or_none(traverse_obj(node, "is_video")),
        has_audio=bool_or_none(traverse_obj(node, "has_audio")),
        video_duration=float_or_none(traverse_obj(node, "video_duration")),
        clips_music_attribution_info=dict_or_none(
            traverse_obj(node, "clips_music_attribution_info")
        ),
        sidecar=list_or_none(traverse_obj(node, ("edge_sidecar_to_children", "edges"))),
        is_paid_partnership=bool_or_none(traverse_obj(node, "is_paid_partnership")),
        location=dict_or_none(traverse_obj(node, "location")),
    )


class GraphqlFetcher(BaseFetcher):
    """Anonymous GraphQL strategy."""

    strategy = Strategy.GRAPHQL

    def _build_params(self, shortcode: str) -> dict[str, str]:
        return {
            "variables": json.dumps({"shortcode": shortcode}, separators=(",", ":")),
            "doc_id": self.settings.ig_doc_id,
            "lsd": self.settings.x_fb_lsd,
        }

    def _build_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Content-Type": "application/x-www-form-urlencoded",
            "X-IG-App-ID": self.settings.x_ig_app_id,
            "X-FB-LSD": self.settings.x_fb_lsd,
            "X-ASBD-ID": self.settings.x_asbd_id,
            "Sec-Fetch-Site": "same-origin",
        }

    async def _fetch(self, shortcode: str, cookie: str | None) -> NormalizedMedia:
        logger.info("Fetching %s via anonymous GraphQL", shortcode)
        response = await self.http.post(
            _GRAPHQL_URL,
            params=self._build_params(shortcode),
            headers=self._build_headers(),
        )
        self._raise_for_status(response)

        document: Any = self._parse_json(response)
        node = dict_or_none(traverse_obj(document, ("data", "xdt_shortcode_media")))
        if node is None:
            raise FetchError(NOT_FOUND_MESSAGE, status=404, details=truncate(response.text) or None)

        return normalize_graphql_media(node)
