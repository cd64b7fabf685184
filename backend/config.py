"""Centralized configuration — all env vars in one place."""

import os

DEFAULT_HN_API_BASE_URL = "https://hacker-news.firebaseio.com/v0"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Upstream Hacker News API
        self.hn_api_base_url: str = os.getenv("HN_API_BASE_URL", DEFAULT_HN_API_BASE_URL).rstrip("/")
        self.upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
        self.item_fetch_concurrency: int = int(os.getenv("ITEM_FETCH_CONCURRENCY", "10"))

        # uvicorn bind, only used when app.py runs as a script
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "8080"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of settings that would break upstream fetching."""
        problems = []
        if self.upstream_timeout_seconds <= 0:
            problems.append("UPSTREAM_TIMEOUT_SECONDS must be positive")
        if self.item_fetch_concurrency < 1:
            problems.append("ITEM_FETCH_CONCURRENCY must be at least 1")
        return problems


settings = Settings()
