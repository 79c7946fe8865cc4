"""Shared fixtures. Required settings are set before the app package is imported."""

import json
import os
from pathlib import Path

import pytest

os.environ.setdefault("USER_AGENT", "Mozilla/5.0 (X11; Linux x86_64) TestAgent/1.0")
os.environ.setdefault("X_IG_APP_ID", "936619743392459")
os.environ.setdefault("COOKIE", "")

from ig_media_api.config import Settings  # noqa: E402

DATA_DIR = Path(__file__).parent / "data"


def load_json(name: str):
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture()
def settings():
    """Settings fixture independent of the process environment."""
    return Settings(
        _env_file=None,
        user_agent="TestAgent/1.0",
        x_ig_app_id="1217981644879628",
        cookie="",
        x_fb_lsd="LSD_TOKEN",
        x_asbd_id="359341",
        ig_doc_id="123456789",
    )


@pytest.fixture()
def cookie_settings(settings):
    return settings.model_copy(update={"cookie": "sessionid=SERVER_SESSION; csrftoken=abc"})


@pytest.fixture()
def graphql_document():
    return load_json("graphql_media.json")


@pytest.fixture()
def cookie_document():
    return load_json("cookie_media.json")


@pytest.fixture()
def carousel_document():
    return load_json("cookie_carousel.json")
