"""Fact-of-the-day snapshot shared with glanceable surfaces."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ValidationError

from facts.models import Fact
from facts.store import FactStore
from storage import KeyValueStore, StorageKeys


class DailyFact(BaseModel):
    fact_id: str
    text: str
    category: str
    insight: str = ""
    source: str = ""
    date: datetime


class DailyFactStore:
    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def get(self) -> Optional[DailyFact]:
        data = self.kv.get_json(StorageKeys.DAILY_FACT)
        if not data:
            return None
        try:
            return DailyFact.model_validate(data)
        except ValidationError:
            return None

    def save(self, fact: Fact, now: datetime) -> DailyFact:
        daily = DailyFact(
            fact_id=fact.id,
            text=fact.text,
            category=fact.category,
            insight=fact.contrary_insight,
            source=fact.source,
            date=now,
        )
        self.kv.set_json(StorageKeys.DAILY_FACT, daily.model_dump(mode="json"))
        return daily

    def todays_fact(self, fact_store: FactStore, now: datetime) -> Optional[DailyFact]:
        """Reuse today's stored fact, otherwise pick and store a new one."""
        current = self.get()
        if current and current.date.date() == now.date():
            return current
        fact = fact_store.random_fact()
        if fact is None:
            return None
        return self.save(fact, now)
