"""Per-fact and per-category discovery bookkeeping."""

from datetime import datetime
from typing import Callable

import structlog
from pydantic import ValidationError

from progress.models import CategoryProgress, CategoryState, UserProgress
from storage import KeyValueStore, StorageKeys

logger = structlog.get_logger()


class ProgressTracker:
    """Tracks which facts the user has seen, globally and per category."""

    def __init__(self, kv: KeyValueStore, clock: Callable[[], datetime] = datetime.now):
        self.kv = kv
        self.clock = clock
        self.progress = self._load()

    def _load(self) -> UserProgress:
        data = self.kv.get_json(StorageKeys.USER_PROGRESS)
        if not data:
            return UserProgress(last_access_date=self.clock())
        try:
            return UserProgress.model_validate(data)
        except ValidationError as e:
            logger.warning("progress_load_failed", error=str(e))
            return UserProgress(last_access_date=self.clock())

    def _save(self) -> None:
        self.kv.set_json(StorageKeys.USER_PROGRESS, self.progress.model_dump(mode="json"))

    @property
    def total_discovered(self) -> int:
        return self.progress.total_discovered

    def mark_discovered(self, fact_id: str, category: str) -> bool:
        """Record *fact_id* as discovered in *category*.

        Idempotent on the sets; access dates refresh on every call.

        Returns:
            True if the fact had not been discovered before.
        """
        now = self.clock()
        is_new = fact_id not in self.progress.discovered_facts
        self.progress.discovered_facts.add(fact_id)

        cat = self.progress.category_progress.setdefault(category, CategoryProgress(last_access_date=now))
        cat.discovered_fact_ids.add(fact_id)
        cat.last_access_date = now

        self.progress.last_access_date = now
        self.progress.last_discovery_date = now
        self._save()
        if is_new:
            logger.debug("fact_discovered", fact_id=fact_id, category=category)
        return is_new

    def discovered_in(self, category: str) -> int:
        cat = self.progress.category_progress.get(category)
        return cat.discovered if cat else 0

    def category_progress(self, category: str, total_facts: int) -> tuple[int, int]:
        return self.discovered_in(category), total_facts

    def category_state(self, category: str, total_facts: int) -> CategoryState:
        return CategoryState.from_counts(self.discovered_in(category), total_facts)

    def overall_progress(self, total_facts: int) -> float:
        if total_facts <= 0:
            return 0.0
        return self.progress.total_discovered / total_facts

    def explored_categories(self) -> list[str]:
        return sorted(k for k, v in self.progress.category_progress.items() if v.discovered_fact_ids)

    def categories_with_progress(self) -> int:
        return len(self.explored_categories())

    def is_discovered(self, fact_id: str) -> bool:
        return fact_id in self.progress.discovered_facts

    def reset(self) -> None:
        self.progress = UserProgress(last_access_date=self.clock())
        self._save()
