"""Hacker News item models."""

from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field


class HNStory(BaseModel):
    id: int
    title: str = "Untitled"
    url: Optional[str] = None
    score: int = 0
    by: str = ""
    time: int = 0
    descendants: Optional[int] = None
    text: Optional[str] = None
    type: str = "story"
    kids: list[int] = Field(default_factory=list)

    @property
    def domain(self) -> Optional[str]:
        if not self.url:
            return None
        host = urlparse(self.url).hostname
        if not host:
            return None
        return host.removeprefix("www.")

    @property
    def comment_count(self) -> int:
        return self.descendants or 0

    @property
    def published(self) -> datetime:
        return datetime.fromtimestamp(self.time)

    @property
    def discussion_url(self) -> str:
        return f"https://news.ycombinator.com/item?id={self.id}"


class HNComment(BaseModel):
    id: int
    by: Optional[str] = None
    text: Optional[str] = None
    time: int = 0
    parent: int
    kids: list[int] = Field(default_factory=list)
    type: str = "comment"

    @property
    def published(self) -> datetime:
        return datetime.fromtimestamp(self.time)
