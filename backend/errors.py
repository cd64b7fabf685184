"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class HackerNewsError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InvalidStoryTypeError(HackerNewsError):
    def __init__(self, story_type: str):
        super().__init__(f"invalid story type: {story_type}")
        self.story_type = story_type


class UpstreamError(HackerNewsError):
    """The Hacker News API could not be reached or returned something unreadable.

    The message is the underlying error text, passed through to the client as-is.
    """


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(HackerNewsError)
    async def handle_hackernews_error(_request: Request, exc: HackerNewsError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
