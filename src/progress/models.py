"""Discovery progress models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from shared_types import CategoryStatus


class CategoryProgress(BaseModel):
    discovered_fact_ids: set[str] = Field(default_factory=set)
    last_access_date: datetime = Field(default_factory=datetime.now)

    @property
    def discovered(self) -> int:
        return len(self.discovered_fact_ids)


class UserProgress(BaseModel):
    discovered_facts: set[str] = Field(default_factory=set)
    category_progress: dict[str, CategoryProgress] = Field(default_factory=dict)
    last_access_date: datetime = Field(default_factory=datetime.now)
    last_discovery_date: Optional[datetime] = None

    @property
    def total_discovered(self) -> int:
        return len(self.discovered_facts)


@dataclass(frozen=True)
class CategoryState:
    """Derived view of a category; never persisted."""

    status: CategoryStatus
    discovered: int
    total: int

    @classmethod
    def from_counts(cls, discovered: int, total: int) -> "CategoryState":
        if discovered == 0:
            status = CategoryStatus.LOCKED
        elif total > 0 and discovered == total:
            status = CategoryStatus.COMPLETED
        else:
            status = CategoryStatus.IN_PROGRESS
        return cls(status=status, discovered=discovered, total=total)

    @property
    def is_accessible(self) -> bool:
        return self.status != CategoryStatus.LOCKED
