"""In-memory fact collection with category metadata and random selection."""

import asyncio
import random
from pathlib import Path
from typing import Optional

import structlog

from facts.categories import categories_from_facts
from facts.defaults import default_facts
from facts.loader import BUNDLED_FACTS_PATH, FactsLoadError, load_facts_file
from facts.models import Category, Fact

logger = structlog.get_logger()

ALL_CATEGORIES = "all"
MAX_REPEAT_ATTEMPTS = 10


class FactStore:
    """Holds the current fact set and picks facts for display.

    The default set is available as soon as the store exists; ``load()`` or
    ``load_async()`` swaps in the bundled file when it is usable.
    """

    def __init__(self, facts_path: Optional[str | Path] = None, rng: Optional[random.Random] = None):
        self.facts_path = Path(facts_path) if facts_path else BUNDLED_FACTS_PATH
        self.rng = rng or random.Random()
        self.facts: list[Fact] = []
        self.categories: list[Category] = []
        self.current_fact: Optional[Fact] = None
        self.selected_category = ALL_CATEGORIES
        self.error_message: Optional[str] = None
        self.is_loading = False
        self._set_facts(default_facts())

    def _set_facts(self, facts: list[Fact]) -> None:
        self.facts = list(facts)
        self.categories = categories_from_facts(self.facts)

    def load(self) -> list[Fact]:
        """Replace the fact set from the file, keeping defaults on any failure."""
        self.is_loading = True
        self.error_message = None
        try:
            facts = load_facts_file(self.facts_path)
        except FactsLoadError as e:
            logger.warning("facts_load_failed", error=str(e))
            self.error_message = "Failed to load facts. Using defaults."
            self._set_facts(default_facts())
            return self.facts
        finally:
            self.is_loading = False

        if not facts:
            logger.warning("facts_empty_after_validation", path=str(self.facts_path))
            self._set_facts(default_facts())
        else:
            self._set_facts(facts)
        return self.facts

    async def load_async(self) -> list[Fact]:
        """Run ``load()`` off the event loop."""
        return await asyncio.to_thread(self.load)

    def random_fact(self, selected_category: Optional[str] = None) -> Optional[Fact]:
        """Pick a fact, trying not to repeat the current one.

        Falls back to all facts when the selected category has none.
        """
        if selected_category is not None:
            self.selected_category = selected_category

        if not self.facts:
            self.error_message = "No facts available"
            return None

        if self.selected_category == ALL_CATEGORIES:
            candidates = self.facts
        else:
            candidates = self.facts_for_category(self.selected_category)

        if not candidates:
            logger.debug("empty_category_reset", category=self.selected_category)
            self.selected_category = ALL_CATEGORIES
            candidates = self.facts

        choice = self.rng.choice(candidates)
        if self.current_fact is not None and len(candidates) > 1:
            attempts = 0
            while choice.id == self.current_fact.id and attempts < MAX_REPEAT_ATTEMPTS:
                choice = self.rng.choice(candidates)
                attempts += 1

        self.current_fact = choice
        self.error_message = None
        return choice

    def facts_for_category(self, key: str) -> list[Fact]:
        return [f for f in self.facts if f.category == key]

    def category_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for fact in self.facts:
            counts[fact.category] = counts.get(fact.category, 0) + 1
        return counts

    def get(self, fact_id: str) -> Optional[Fact]:
        for fact in self.facts:
            if fact.id == fact_id:
                return fact
        return None
