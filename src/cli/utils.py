"""Shared CLI utilities."""

from pathlib import Path
from typing import Optional

import structlog

logger = structlog.get_logger()


def get_components(config_path: Optional[Path] = None) -> dict:
    """Build every store from config, sharing one key-value store."""
    from beliefs import BeliefTracker
    from cli.config import load_config_model
    from facts import DailyFactStore, FactStore
    from favorites import FavoritesStore
    from journey import JourneyTracker
    from progress import ProgressTracker
    from settings import SettingsStore
    from storage import SQLiteKeyValueStore

    config_model = load_config_model(config_path)
    paths = config_model.paths

    kv = SQLiteKeyValueStore(paths.data_db)
    facts = FactStore(paths.facts_file)
    facts.load()
    logger.debug("components_ready", db=str(paths.data_db), facts=len(facts.facts))

    return {
        "config_model": config_model,
        "kv": kv,
        "facts": facts,
        "daily": DailyFactStore(kv),
        "favorites": FavoritesStore(kv),
        "progress": ProgressTracker(kv),
        "journey": JourneyTracker(kv, weekly_goal=config_model.journey.weekly_goal),
        "beliefs": BeliefTracker(kv),
        "settings": SettingsStore(kv),
    }


def get_news_client(config_model):
    """HN client configured from the ``news`` and ``retry`` sections."""
    from news import HNClient

    news = config_model.news
    retry = config_model.retry
    return HNClient(
        api_base=news.api_base,
        batch_size=news.batch_size,
        timeout=news.timeout,
        user_agent=news.user_agent,
        max_attempts=retry.max_attempts,
        min_wait=retry.min_wait,
        max_wait=retry.max_wait,
    )


def discover_fact(c: dict, fact) -> bool:
    """Mark *fact* discovered and, when it is new, count it on the journey.

    Every CLI run is a visit, so the daily-visit check runs first and
    rolls the streak and daily counters over on a new calendar day.

    Returns True if this was a first discovery.
    """
    from storage import StorageKeys

    c["journey"].check_daily_visit()
    is_new = c["progress"].mark_discovered(fact.id, fact.category)
    if is_new:
        c["journey"].record_discovery(c["progress"].total_discovered)
    c["kv"].set_json(StorageKeys.LAST_FACT_ID, fact.id)
    return is_new


def last_fact(c: dict):
    """The fact most recently shown by ``contrario fact``, if it still exists."""
    from storage import StorageKeys

    fact_id = c["kv"].get_json(StorageKeys.LAST_FACT_ID)
    return c["facts"].get(fact_id) if fact_id else None
