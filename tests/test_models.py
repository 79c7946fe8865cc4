"""Tests for Pydantic models and enum definitions."""

import pytest
from pydantic import ValidationError

from ig_media_api.models.enums import MediaKind, Strategy
from ig_media_api.models.request import CookieFetchRequest
from ig_media_api.models.response import (
    CarouselItem,
    ErrorEnvelope,
    NormalizedMedia,
    SuccessEnvelope,
)


# ── Enum completeness ────────────────────────────────────────────────
class TestEnums:
    def test_strategies(self):
        assert {s.value for s in Strategy} == {"graphql", "cookie"}

    def test_media_kinds(self):
        assert {k.value for k in MediaKind} == {"p", "reel", "reels", "stories"}


# ── NormalizedMedia ──────────────────────────────────────────────────
class TestNormalizedMedia:
    def test_all_fields_optional(self):
        media = NormalizedMedia()
        assert media.code is None
        assert media.carousel_media is None

    def test_typename_serialized_with_alias(self):
        media = NormalizedMedia(typename="XDTGraphImage")
        dumped = media.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"__typename": "XDTGraphImage"}

    def test_empty_carousel_distinct_from_absent(self):
        empty = NormalizedMedia(carousel_media=[]).model_dump(exclude_none=True)
        absent = NormalizedMedia().model_dump(exclude_none=True)
        assert empty == {"carousel_media": []}
        assert "carousel_media" not in absent

    def test_carousel_item(self):
        item = CarouselItem(image_versions=[{"url": "https://x/1.jpg"}])
        assert item.video_versions is None


# ── Envelopes ────────────────────────────────────────────────────────
class TestEnvelopes:
    def test_success_shape(self):
        envelope = SuccessEnvelope(data=NormalizedMedia(code="abc", like_count=3))
        assert envelope.to_dict() == {
            "ok": True,
            "status": 200,
            "data": {"code": "abc", "like_count": 3},
        }

    def test_success_status_fixed(self):
        with pytest.raises(ValidationError):
            SuccessEnvelope(status=201, data=NormalizedMedia())

    def test_error_shape_without_details(self):
        envelope = ErrorEnvelope(status=400, error="Invalid Instagram URL.")
        assert envelope.to_dict() == {
            "ok": False,
            "status": 400,
            "error": "Invalid Instagram URL.",
        }

    def test_error_shape_with_details(self):
        envelope = ErrorEnvelope(status=403, error="Instagram request failed (403)", details="nope")
        assert envelope.to_dict()["details"] == "nope"
        assert envelope.ok is False

    def test_error_ok_cannot_be_true(self):
        with pytest.raises(ValidationError):
            ErrorEnvelope(ok=True, status=400, error="x")

    def test_error_status_range(self):
        with pytest.raises(ValidationError):
            ErrorEnvelope(status=42, error="x")
        with pytest.raises(ValidationError):
            ErrorEnvelope(status=1000, error="x")

    def test_error_status_above_599_accepted(self):
        envelope = ErrorEnvelope(status=999, error="Instagram request failed (999)")
        assert envelope.to_dict()["status"] == 999


# ── CookieFetchRequest ───────────────────────────────────────────────
class TestCookieFetchRequest:
    def test_minimal(self):
        req = CookieFetchRequest(url="https://www.instagram.com/p/abc/")
        assert req.cookie is None

    def test_cookie_hidden_from_repr(self):
        req = CookieFetchRequest(url="https://www.instagram.com/p/abc/", cookie="sessionid=secret")
        assert "secret" not in repr(req)

    def test_url_required(self):
        with pytest.raises(ValidationError):
            CookieFetchRequest()

    def test_url_max_length(self):
        with pytest.raises(ValidationError):
            CookieFetchRequest(url="https://instagram.com/p/" + "a" * 3000)
