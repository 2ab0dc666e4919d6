"""Saved facts, uniqued by id and kept in insertion order."""

import structlog
from pydantic import ValidationError

from facts.models import Fact
from storage import KeyValueStore, StorageKeys

logger = structlog.get_logger()


class FavoritesStore:
    def __init__(self, kv: KeyValueStore):
        self.kv = kv
        self._favorites: list[Fact] = self._load()

    def _load(self) -> list[Fact]:
        data = self.kv.get_json(StorageKeys.FAVORITES, default=[])
        try:
            facts = [Fact.model_validate(item) for item in data]
        except (ValidationError, TypeError) as e:
            logger.warning("favorites_load_failed", error=str(e))
            return []
        seen: set[str] = set()
        unique = []
        for fact in facts:
            if fact.id not in seen:
                seen.add(fact.id)
                unique.append(fact)
        return unique

    def _save(self) -> None:
        self.kv.set_json(StorageKeys.FAVORITES, [f.to_dict() for f in self._favorites])

    @property
    def favorites(self) -> list[Fact]:
        return list(self._favorites)

    def __len__(self) -> int:
        return len(self._favorites)

    def is_favorite(self, fact: Fact) -> bool:
        return any(f.id == fact.id for f in self._favorites)

    def add(self, fact: Fact) -> None:
        if self.is_favorite(fact):
            return
        self._favorites.append(fact)
        self._save()

    def remove(self, fact: Fact) -> None:
        self._favorites = [f for f in self._favorites if f.id != fact.id]
        self._save()

    def toggle(self, fact: Fact) -> bool:
        """Flip favorite state; returns True if the fact is now a favorite."""
        if self.is_favorite(fact):
            self.remove(fact)
            return False
        self.add(fact)
        return True

    def clear(self) -> None:
        self._favorites = []
        self._save()
        logger.info("favorites_cleared")
