"""User-authored beliefs and how they change over time."""

import uuid
from datetime import datetime
from typing import Callable, Optional

import structlog
from pydantic import BaseModel, Field, ValidationError

from storage import KeyValueStore, StorageKeys

logger = structlog.get_logger()


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class TrackedBelief(BaseModel):
    id: str = Field(default_factory=_new_id)
    topic: str
    initial_position: str
    current_position: str
    date_added: datetime
    last_updated: datetime


class BeliefChange(BaseModel):
    id: str = Field(default_factory=_new_id)
    belief_id: str
    from_position: str
    to_position: str
    date: datetime
    trigger_fact: Optional[str] = None


class BeliefTracker:
    def __init__(self, kv: KeyValueStore, clock: Callable[[], datetime] = datetime.now):
        self.kv = kv
        self.clock = clock
        self.beliefs: list[TrackedBelief] = self._load(StorageKeys.TRACKED_BELIEFS, TrackedBelief)
        self.changes: list[BeliefChange] = self._load(StorageKeys.BELIEF_CHANGES, BeliefChange)

    def _load(self, key: str, model):
        data = self.kv.get_json(key, default=[])
        try:
            return [model.model_validate(item) for item in data]
        except (ValidationError, TypeError) as e:
            logger.warning("beliefs_load_failed", key=key, error=str(e))
            return []

    def _save(self) -> None:
        self.kv.set_json(StorageKeys.TRACKED_BELIEFS, [b.model_dump(mode="json") for b in self.beliefs])
        self.kv.set_json(StorageKeys.BELIEF_CHANGES, [c.model_dump(mode="json") for c in self.changes])

    def get(self, belief_id: str) -> Optional[TrackedBelief]:
        return next((b for b in self.beliefs if b.id == belief_id), None)

    def add_belief(self, topic: str, position: str) -> TrackedBelief:
        now = self.clock()
        belief = TrackedBelief(
            topic=topic,
            initial_position=position,
            current_position=position,
            date_added=now,
            last_updated=now,
        )
        self.beliefs.append(belief)
        self._save()
        logger.info("belief_added", belief_id=belief.id)
        return belief

    def update_belief(
        self, belief_id: str, new_position: str, trigger_fact: Optional[str] = None
    ) -> Optional[BeliefChange]:
        """Move a belief to *new_position*, recording the change. None if the id is unknown."""
        belief = self.get(belief_id)
        if belief is None:
            return None

        now = self.clock()
        change = BeliefChange(
            belief_id=belief.id,
            from_position=belief.current_position,
            to_position=new_position,
            date=now,
            trigger_fact=trigger_fact,
        )
        self.changes.append(change)
        belief.current_position = new_position
        belief.last_updated = now
        self._save()
        return change

    def changes_for(self, belief_id: str) -> list[BeliefChange]:
        return [c for c in self.changes if c.belief_id == belief_id]
