"""Hacker News API client."""

import asyncio
from typing import Any, Optional

import httpx
import structlog
from pydantic import TypeAdapter

from cli.retry import http_retry
from news.models import HNComment, HNStory
from shared_types import StoryType

logger = structlog.get_logger()

StoryIds = TypeAdapter(list[int])


class NewsFetchError(Exception):
    """The story id list could not be fetched. The message is shown to the user."""


class HNClient:
    """Async client for the public Hacker News JSON API.

    Story details are fetched in fixed-size batches; each batch runs
    concurrently and batches run one after another. Ids already loaded in this
    session are skipped until ``refresh``.
    """

    API_BASE = "https://hacker-news.firebaseio.com/v0"

    def __init__(
        self,
        api_base: str = API_BASE,
        batch_size: int = 10,
        timeout: float = 30.0,
        user_agent: str = "Contrario/1.0",
        max_attempts: int = 3,
        min_wait: float = 2.0,
        max_wait: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.batch_size = max(1, batch_size)
        self.client = client or httpx.AsyncClient(timeout=timeout, headers={"User-Agent": user_agent})
        self.stories: dict[StoryType, list[HNStory]] = {}
        self.loaded_story_ids: set[int] = set()
        self.is_loading = False
        self.error_message: Optional[str] = None
        self._fetch_ids = http_retry(
            max_attempts=max_attempts,
            min_wait=min_wait,
            max_wait=max_wait,
        )(self._fetch_ids_once)

    async def _get_json(self, path: str) -> Any:
        response = await self.client.get(f"{self.api_base}/{path}")
        response.raise_for_status()
        return response.json()

    async def _fetch_ids_once(self, story_type: StoryType) -> list[int]:
        # ValidationError subclasses ValueError.
        return StoryIds.validate_python(await self._get_json(f"{story_type.value}.json"))

    async def load_stories(self, story_type: StoryType = StoryType.TOP, limit: int = 30) -> list[HNStory]:
        """Fetch up to *limit* stories for a feed.

        Raises:
            NewsFetchError: the id list could not be fetched or decoded.
        """
        self.is_loading = True
        self.error_message = None
        try:
            try:
                logger.debug("fetching_story_ids", feed=story_type.value)
                story_ids = await self._fetch_ids(story_type)
            except (httpx.HTTPError, ValueError) as e:
                self.error_message = f"Failed to load stories: {e}"
                logger.error("story_ids_failed", feed=story_type.value, error=str(e))
                raise NewsFetchError(self.error_message) from e

            story_ids = list(dict.fromkeys(story_ids))[:limit]
            stories: list[HNStory] = []
            for start in range(0, len(story_ids), self.batch_size):
                batch = story_ids[start:start + self.batch_size]
                results = await asyncio.gather(*(self._fetch_story(sid) for sid in batch))
                stories.extend(s for s in results if s is not None)

            if story_type == StoryType.NEW:
                stories.sort(key=lambda s: s.time, reverse=True)
            else:
                stories.sort(key=lambda s: s.score, reverse=True)

            self.stories[story_type] = stories
            logger.info("stories_loaded", feed=story_type.value, count=len(stories))
            return stories
        finally:
            self.is_loading = False

    async def _fetch_story(self, story_id: int) -> Optional[HNStory]:
        if story_id in self.loaded_story_ids:
            return None
        try:
            data = await self._get_json(f"item/{story_id}.json")
            if not data:
                return None
            story = HNStory.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.debug("story_fetch_failed", story_id=story_id, error=str(e))
            return None
        self.loaded_story_ids.add(story_id)
        return story

    async def refresh(self, story_type: StoryType = StoryType.TOP, limit: int = 30) -> list[HNStory]:
        self.loaded_story_ids.clear()
        return await self.load_stories(story_type, limit=limit)

    async def load_comments(self, story_id: int, limit: int = 20) -> list[HNComment]:
        """Top-level comments for a story, newest first. Empty on any failure."""
        try:
            data = await self._get_json(f"item/{story_id}.json")
            if not data:
                return []
            story = HNStory.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("comments_fetch_failed", story_id=story_id, error=str(e))
            return []

        results = await asyncio.gather(*(self._fetch_comment(cid) for cid in story.kids[:limit]))
        comments = [c for c in results if c is not None]
        comments.sort(key=lambda c: c.time, reverse=True)
        return comments

    async def _fetch_comment(self, comment_id: int) -> Optional[HNComment]:
        try:
            data = await self._get_json(f"item/{comment_id}.json")
            if not data:
                return None
            return HNComment.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.debug("comment_fetch_failed", comment_id=comment_id, error=str(e))
            return None

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
