"""Tests for environment-driven settings."""

from config import DEFAULT_HN_API_BASE_URL, Settings


def test_defaults(monkeypatch) -> None:
    for var in ("CORS_ORIGINS", "ENVIRONMENT", "HN_API_BASE_URL", "UPSTREAM_TIMEOUT_SECONDS", "ITEM_FETCH_CONCURRENCY", "PORT"):
        monkeypatch.delenv(var, raising=False)

    s = Settings()

    assert s.cors_origins == ["*"]
    assert s.hn_api_base_url == DEFAULT_HN_API_BASE_URL
    assert s.upstream_timeout_seconds == 10.0
    assert s.item_fetch_concurrency == 10
    assert s.port == 8080
    assert not s.is_production
    assert s.validate() == []


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example,https://b.example")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("HN_API_BASE_URL", "http://localhost:9000/v0/")

    s = Settings()

    assert s.cors_origins == ["https://a.example", "https://b.example"]
    assert s.is_production
    assert s.hn_api_base_url == "http://localhost:9000/v0"


def test_validate_flags_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "0")
    monkeypatch.setenv("ITEM_FETCH_CONCURRENCY", "0")

    assert len(Settings().validate()) == 2
