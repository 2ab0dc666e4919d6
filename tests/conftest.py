"""Shared test fixtures for contrario."""

import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from facts.models import Fact  # noqa: E402
from storage import MemoryKeyValueStore, SQLiteKeyValueStore  # noqa: E402


class FakeClock:
    """Callable clock that tests move forward by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> datetime:
        self.now = self.now + timedelta(days=days, hours=hours)
        return self.now


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def sqlite_kv(tmp_path):
    return SQLiteKeyValueStore(tmp_path / "contrario.db")


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 4, 10, 0, 0))


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def sample_facts():
    """Small fact set spanning three categories."""
    return [
        Fact(
            text="Most startups fail because they build products nobody wants",
            category="business",
            source="CB Insights",
            contrary_insight="Talk to customers before writing code",
        ),
        Fact(
            text="Remote teams can out-communicate co-located ones",
            category="business",
            contrary_insight="Writing forces clarity",
        ),
        Fact(
            text="Older programming languages often outlive their replacements",
            category="technology",
            contrary_insight="Boring technology compounds",
        ),
        Fact(
            text="Boredom is a precondition for creativity",
            category="philosophy",
        ),
    ]


@pytest.fixture
def facts_file(tmp_path, sample_facts):
    """JSON file with the sample facts in the bundled-file shape."""
    import json

    path = tmp_path / "facts.json"
    entries = [f.to_dict() for f in sample_facts]
    for entry in entries:
        entry.pop("id")
    path.write_text(json.dumps(entries))
    return path
