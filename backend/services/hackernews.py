"""Hacker News client: cached story listings built from the Firebase API.

One listing call (``topstories.json`` etc.) returns ranked ids; each of the
first ``max_stories`` ids is then looked up via ``item/{id}.json``. The
resulting stories are cached per story type.
"""

import asyncio
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from config import DEFAULT_HN_API_BASE_URL
from errors import InvalidStoryTypeError, UpstreamError
from models import HNItem, Story, StoryType
from services.cache import TTLCache

logger = logging.getLogger(__name__)

MAX_STORIES = 30

_story_ids = TypeAdapter(list[int])


def build_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": "hn-stories-api/1.0"},
    )


class StoryFetcher:
    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache,
        *,
        base_url: str = DEFAULT_HN_API_BASE_URL,
        max_stories: int = MAX_STORIES,
        concurrency: int = 10,
    ):
        self._client = client
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._max_stories = max_stories
        self._semaphore = asyncio.Semaphore(max(1, concurrency))

    async def fetch_stories(self, story_type: str) -> tuple[Story, ...]:
        """Return up to ``max_stories`` stories for ``story_type``, cache first.

        Raises:
            InvalidStoryTypeError: ``story_type`` is not top, show or ask.
            UpstreamError: the id listing could not be fetched or decoded.
        """
        cached = self._cache.get(story_type)
        if cached is not None:
            logger.debug("Cache hit for %s stories (%d)", story_type, len(cached))
            return cached

        try:
            kind = StoryType(story_type)
        except ValueError:
            raise InvalidStoryTypeError(story_type) from None

        ids = (await self._fetch_story_ids(kind))[: self._max_stories]
        items = await asyncio.gather(*[self._fetch_item(item_id) for item_id in ids])

        prefix = kind.title_prefix
        stories = tuple(
            Story.from_item(item, kind)
            for item in items
            if item is not None and (prefix is None or item.title.startswith(prefix))
        )

        self._cache.set(kind.value, stories)
        logger.info(
            "Refreshed %s stories: %d kept of %d listed", kind.value, len(stories), len(ids)
        )
        return stories

    async def ping(self) -> int:
        """Return the upstream's current max item id. Used by the health check."""
        try:
            resp = await self._client.get(f"{self._base_url}/maxitem.json")
            resp.raise_for_status()
            return TypeAdapter(int).validate_json(resp.content)
        except (httpx.HTTPError, ValidationError) as e:
            raise UpstreamError(str(e)) from e

    async def _fetch_story_ids(self, kind: StoryType) -> list[int]:
        url = f"{self._base_url}/{kind.endpoint}.json"
        logger.info("Fetching %s listing from %s", kind.value, url)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return _story_ids.validate_json(resp.content)
        except (httpx.HTTPError, ValidationError) as e:
            logger.warning("Listing fetch failed for %s: %s", kind.value, e)
            raise UpstreamError(str(e)) from e

    async def _fetch_item(self, item_id: int) -> HNItem | None:
        """Fetch a single item. Returns None on failure."""
        async with self._semaphore:
            try:
                resp = await self._client.get(f"{self._base_url}/item/{item_id}.json")
                resp.raise_for_status()
                return HNItem.model_validate_json(resp.content)
            except (httpx.HTTPError, ValidationError) as e:
                logger.warning("Item fetch failed for %s: %s", item_id, e)
                return None
