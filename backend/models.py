"""Wire shapes: the upstream Hacker News item and the story we serve."""

from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

COMMENTS_URL = "https://news.ycombinator.com/item?id={id}"

# Unix seconds that datetime can represent (years 1 through 9999)
MIN_TIMESTAMP = int(datetime(1, 1, 1, tzinfo=timezone.utc).timestamp())
MAX_TIMESTAMP = int(datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc).timestamp())


class StoryType(StrEnum):
    TOP = "top"
    SHOW = "show"
    ASK = "ask"

    @property
    def endpoint(self) -> str:
        """Upstream listing name, e.g. ``topstories``."""
        return f"{self.value}stories"

    @property
    def title_prefix(self) -> str | None:
        """Required title prefix for this listing, or None to keep everything."""
        return _TITLE_PREFIXES.get(self)


_TITLE_PREFIXES = {
    StoryType.SHOW: "Show HN:",
    StoryType.ASK: "Ask HN:",
}


class HNItem(BaseModel):
    """One item as returned by ``/v0/item/{id}.json``.

    Ask HN posts have no url and fresh stories may lack descendants, so every
    field but the id falls back to an empty value.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    type: str = ""
    by: str = ""
    time: int = Field(default=0, ge=MIN_TIMESTAMP, le=MAX_TIMESTAMP)
    title: str = ""
    url: str = ""
    score: int = 0
    descendants: int = 0


class Story(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    url: str
    points: int
    submitted_by: str
    created_at: datetime
    comments_url: str
    type: StoryType

    @classmethod
    def from_item(cls, item: HNItem, story_type: StoryType) -> "Story":
        """Normalize an upstream item, tagging it with the listing it came from."""
        return cls(
            id=item.id,
            title=item.title,
            url=item.url,
            points=item.score,
            submitted_by=item.by,
            created_at=datetime.fromtimestamp(item.time, tz=timezone.utc),
            comments_url=COMMENTS_URL.format(id=item.id),
            type=story_type,
        )
