from typing import Any, Literal

from pydantic import BaseModel, Field


class CarouselItem(BaseModel):
    """One child of a carousel post."""

    image_versions: list[Any] | None = Field(None, description="Image candidates for this child")
    video_versions: list[Any] | None = Field(None, description="Video variants for this child")


class NormalizedMedia(BaseModel):
    """
    Stable projection of an Instagram media node.

    Every field is optional. Fields the upstream did not provide stay None
    and are omitted when the record is serialized.
    """

    # identity
    code: str | None = Field(None, description="Media shortcode (cookie API naming)")
    shortcode: str | None = Field(None, description="Media shortcode (GraphQL naming)")
    typename: str | None = Field(
        None,
        serialization_alias="__typename",
        description="GraphQL node type (GraphImage, GraphVideo, GraphSidecar, XDT...)",
    )
    product_type: str | None = Field(None, description="feed, clips, carousel_container, igtv...")
    created_at: int | None = Field(None, description="Publication time as a Unix timestamp")

    # author
    username: str | None = Field(None, description="Author username")
    full_name: str | None = Field(None, description="Author display name")
    profile_picture: str | None = Field(None, description="Author profile picture URL")
    is_verified: bool | None = Field(None, description="Whether the author is verified")
    owner: dict[str, Any] | None = Field(None, description="Raw owner object (GraphQL)")

    caption: str | None = Field(None, description="Caption text")

    # engagement
    like_count: int | None = Field(None, description="Like count")
    comment_count: int | None = Field(None, description="Comment count")
    view_count: int | None = Field(None, description="View or play count")
    video_view_count: int | None = Field(None, description="Video view count (GraphQL)")
    video_play_count: int | None = Field(None, description="Video play count (GraphQL)")

    # dimensions
    height: int | None = Field(None, description="Height in pixels")
    width: int | None = Field(None, description="Width in pixels")
    dimensions: dict[str, Any] | None = Field(None, description="Raw dimensions object (GraphQL)")

    # media
    display_url: str | None = Field(None, description="Main display image URL")
    display_resources: list[Any] | None = Field(None, description="Display image variants")
    thumbnail_src: str | None = Field(None, description="Thumbnail URL")
    image_versions: list[Any] | None = Field(None, description="Image candidates")
    video_versions: list[Any] | None = Field(None, description="Video variants")
    video_url: str | None = Field(None, description="Direct video URL")
    is_video: bool | None = Field(None, description="Whether the media is a video")
    has_audio: bool | None = Field(None, description="Whether the video has an audio track")
    video_duration: float | None = Field(None, description="Video duration in seconds")
    clips_music_attribution_info: dict[str, Any] | None = Field(
        None, description="Music attribution for reels"
    )

    # children
    carousel_media: list[CarouselItem] | None = Field(
        None, description="Carousel children; absent when the post is not a carousel"
    )
    sidecar: list[Any] | None = Field(None, description="Raw sidecar child edges (GraphQL)")

    # partnership / location
    is_paid_partnership: bool | None = Field(None, description="Paid partnership flag")
    location: dict[str, Any] | None = Field(None, description="Tagged location")


class _Envelope(BaseModel):
    def to_dict(self) -> dict[str, Any]:
        """Serialize for the HTTP layer: aliases applied, absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SuccessEnvelope(_Envelope):
    """Successful fetch."""

    ok: Literal[True] = True
    status: Literal[200] = 200
    data: NormalizedMedia


class ErrorEnvelope(_Envelope):
    """Expected failure. `status` is the HTTP status the caller should emit."""

    ok: Literal[False] = False
    status: int = Field(..., ge=100, le=999)
    error: str = Field(..., description="Error message")
    details: str | None = Field(None, description="Truncated diagnostic, never the credential")


ResultEnvelope = SuccessEnvelope | ErrorEnvelope
