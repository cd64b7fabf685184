"""Story listing routes.

GET /api/stories          → top stories
GET /api/stories/{type}   → top, show or ask
"""

from fastapi import APIRouter, Depends, Request

from models import Story, StoryType
from services.hackernews import StoryFetcher

router = APIRouter(prefix="/api", tags=["stories"])


def get_story_fetcher(request: Request) -> StoryFetcher:
    return request.app.state.story_fetcher


@router.get("/stories", response_model=list[Story])
@router.get("/stories/{story_type}", response_model=list[Story])
async def get_stories(
    story_type: str = StoryType.TOP.value,
    fetcher: StoryFetcher = Depends(get_story_fetcher),
) -> list[Story]:
    """Stories for a listing, in Hacker News ranking order.

    Unknown types are rejected by the fetcher so the error body carries the
    offending value.
    """
    return list(await fetcher.fetch_stories(story_type))
