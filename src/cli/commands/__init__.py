"""CLI command modules."""

from .beliefs import beliefs
from .facts import categories, daily, fact
from .favorites import favorites
from .journey import journey, progress, visit
from .news import news
from .settings import settings

__all__ = [
    "fact",
    "daily",
    "categories",
    "visit",
    "progress",
    "journey",
    "favorites",
    "beliefs",
    "settings",
    "news",
]
