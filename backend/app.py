"""FastAPI application entry point for the Hacker News stories API."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.hackernews import StoryFetcher, build_http_client

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Hacker News Stories API", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Origin", "Content-Type"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.stories import router as stories_router

    app.include_router(health_router)
    app.include_router(stories_router)

    @app.on_event("startup")
    async def _startup() -> None:
        problems = settings.validate()
        if problems:
            logger.warning("Invalid settings (falling back where possible): %s", ", ".join(problems))

        # One cache per app instance, discarded with it at shutdown
        app.state.http_client = build_http_client(
            settings.upstream_timeout_seconds if settings.upstream_timeout_seconds > 0 else 10.0
        )
        app.state.story_fetcher = StoryFetcher(
            app.state.http_client,
            TTLCache(),
            base_url=settings.hn_api_base_url,
            concurrency=settings.item_fetch_concurrency,
        )

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        await app.state.http_client.aclose()

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
