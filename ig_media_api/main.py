"""
Instagram Media API - FastAPI application entry point.

Resolves Instagram post, reel and story URLs into normalized media
metadata, either through the anonymous GraphQL endpoint or through the
cookie-authenticated private API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes.api import router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Instagram Media API starting up...")

    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"GraphQL doc_id: {settings.ig_doc_id}")
    if settings.cookie:
        logger.info("Default session cookie configured")
    else:
        logger.warning("No COOKIE set - cookie endpoint requires a per-request x-ig-cookie header")

    yield

    logger.info("Instagram Media API shutting down...")


app = FastAPI(
    title="Instagram Media API",
    description=(
        "Resolves Instagram post, reel and story URLs into normalized media "
        "metadata through the anonymous GraphQL endpoint or a "
        "cookie-authenticated request."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: use CORS_ORIGINS env (comma-separated) for explicit origins; empty = "*" without credentials (safe default)
_origins = [o.strip() for o in get_settings().cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["*"],
    allow_credentials=bool(_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api")


@app.get("/healthz", tags=["root"])
async def healthz():
    return {"ok": True}


@app.get("/", tags=["root"])
async def root():
    return {
        "name": "Instagram Media API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "graphql": "/api/instagram",
            "by_cookie": "/api/instagram/by-cookie",
            "health": "/healthz",
        },
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ig_media_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
