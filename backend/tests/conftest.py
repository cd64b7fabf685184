"""Shared test fixtures: a stubbed Hacker News API and a controllable clock."""

import httpx
import pytest

from services.cache import TTLCache
from services.hackernews import StoryFetcher

BASE_URL = "https://hn.test/v0"


def make_item(item_id: int, title: str, **overrides) -> dict:
    """Helper to create an upstream item payload."""
    item = {
        "id": item_id,
        "type": "story",
        "by": f"user{item_id}",
        "time": 1_700_000_000 + item_id,
        "title": title,
        "url": f"https://example.com/{item_id}",
        "score": item_id * 10,
        "descendants": item_id,
    }
    item.update(overrides)
    return item


class FakeHackerNews:
    """In-memory stand-in for the Firebase API, recording every request path."""

    def __init__(self):
        self.listings: dict[str, list[int]] = {}
        self.items: dict[int, dict] = {}
        self.failing_items: set[int] = set()
        self.listing_error: Exception | None = None
        self.max_item = 42_000_000
        self.requests: list[str] = []

    def add_items(self, *items: dict) -> None:
        for item in items:
            self.items[item["id"]] = item

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/v0/")
        self.requests.append(path)

        if path == "maxitem.json":
            return httpx.Response(200, json=self.max_item)

        if path.startswith("item/"):
            item_id = int(path.removeprefix("item/").removesuffix(".json"))
            if item_id in self.failing_items:
                return httpx.Response(503, text="unavailable")
            # The real API answers unknown ids with a literal null
            return httpx.Response(200, json=self.items.get(item_id))

        if self.listing_error is not None:
            raise self.listing_error
        listing = path.removesuffix(".json")
        if listing not in self.listings:
            return httpx.Response(404, json={"error": "Permission denied"})
        return httpx.Response(200, json=self.listings[listing])

    @property
    def item_requests(self) -> list[str]:
        return [p for p in self.requests if p.startswith("item/")]


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def upstream() -> FakeHackerNews:
    return FakeHackerNews()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(clock=clock)


@pytest.fixture()
def http_client(upstream: FakeHackerNews) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture()
def fetcher(http_client: httpx.AsyncClient, cache: TTLCache) -> StoryFetcher:
    return StoryFetcher(http_client, cache, base_url=BASE_URL)
