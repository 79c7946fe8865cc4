"""
API route definitions for the Instagram Media API.

The envelope's `status` is mirrored onto the HTTP status code. Unexpected
exceptions (network failures and the like) become a 500 envelope here.
"""

import logging

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..extractors import get_fetcher
from ..models.enums import Strategy
from ..models.request import CookieFetchRequest
from ..models.response import ErrorEnvelope, SuccessEnvelope

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Invalid URL or missing cookie"},
    404: {"model": ErrorEnvelope, "description": "Media not found or response shape changed"},
    500: {"model": ErrorEnvelope, "description": "Internal error"},
}


async def _run_fetch(
    strategy: Strategy,
    url: str,
    settings: Settings,
    cookie: str | None = None,
) -> JSONResponse:
    if not url:
        envelope = ErrorEnvelope(status=400, error="Query param 'url' is required.")
        return JSONResponse(status_code=envelope.status, content=envelope.to_dict())

    fetcher = get_fetcher(strategy, settings=settings)
    try:
        envelope = await fetcher.fetch(url, cookie=cookie)
    except Exception as e:
        logger.exception("Unexpected error during %s fetch: %s", strategy.value, e)
        # Do not leak exception details in production
        envelope = ErrorEnvelope(
            status=500,
            error="Internal error",
            details=str(e) if settings.debug else None,
        )
    return JSONResponse(status_code=envelope.status, content=envelope.to_dict())


@router.get(
    "/instagram",
    response_model=SuccessEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Fetch media metadata through the anonymous GraphQL endpoint",
)
async def fetch_graphql(url: str = "", settings: Settings = Depends(get_settings)):
    return await _run_fetch(Strategy.GRAPHQL, url.strip(), settings)


@router.get(
    "/instagram/by-cookie",
    response_model=SuccessEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Fetch media metadata with a logged-in session cookie",
    description=(
        "Uses the server-wide COOKIE unless the request carries its own "
        "session cookie in the x-ig-cookie header."
    ),
)
async def fetch_by_cookie(
    url: str = "",
    x_ig_cookie: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    return await _run_fetch(Strategy.COOKIE, url.strip(), settings, cookie=x_ig_cookie)


@router.post(
    "/instagram/by-cookie",
    response_model=SuccessEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Fetch media metadata with a session cookie passed in the body",
)
async def fetch_by_cookie_body(
    request: CookieFetchRequest,
    x_ig_cookie: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    return await _run_fetch(
        Strategy.COOKIE,
        request.url.strip(),
        settings,
        cookie=request.cookie or x_ig_cookie,
    )
