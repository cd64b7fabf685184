"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Depends

from config import settings
from errors import UpstreamError
from routes.stories import get_story_fetcher
from services.hackernews import StoryFetcher

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "hn-stories-api", "commit": settings.git_sha}


@router.get("/health")
async def health(fetcher: StoryFetcher = Depends(get_story_fetcher)) -> dict:
    """Deep health check that verifies the Hacker News API is reachable."""
    result = {"status": "ok", "service": "hn-stories-api", "commit": settings.git_sha, "upstream": "not_tested"}

    try:
        result["max_item"] = await fetcher.ping()
        result["upstream"] = "connected"
    except UpstreamError as e:
        logger.warning("Hacker News health check failed: %s", e)
        result["upstream"] = "error"
        result["upstream_error"] = str(e)

    return result
