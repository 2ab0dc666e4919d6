"""Tests for CLI component wiring."""

import pytest
import yaml

from cli.config_models import ContrarioConfig
from cli.utils import discover_fact, get_components, get_news_client, last_fact
from facts import FactStore
from journey import JourneyTracker
from progress import ProgressTracker
from storage import SQLiteKeyValueStore


@pytest.fixture
def components(tmp_path, facts_file):
    config = tmp_path / "contrario.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "paths": {"data_db": str(tmp_path / "data" / "contrario.db"), "facts_file": str(facts_file)},
                "journey": {"weekly_goal": 5},
            }
        )
    )
    return get_components(config)


def test_get_components(components, tmp_path):
    assert isinstance(components["kv"], SQLiteKeyValueStore)
    assert (tmp_path / "data" / "contrario.db").exists()
    assert len(components["facts"].facts) == 4
    assert components["journey"].state.weekly_goal == 5


def test_discover_fact_counts_once(components):
    fact = components["facts"].facts[0]

    assert discover_fact(components, fact) is True
    assert discover_fact(components, fact) is False

    assert components["progress"].total_discovered == 1
    assert components["journey"].state.daily_discoveries == 1
    assert last_fact(components) == fact


def test_last_fact_none(components):
    assert last_fact(components) is None


def test_state_survives_rebuild(components, tmp_path):
    discover_fact(components, components["facts"].facts[1])
    rebuilt = get_components(tmp_path / "contrario.yaml")
    assert rebuilt["progress"].total_discovered == 1
    assert last_fact(rebuilt) == components["facts"].facts[1]


def test_get_news_client_uses_config():
    config = ContrarioConfig.from_dict({"news": {"api_base": "https://hn.test/v0/", "batch_size": 3}})
    client = get_news_client(config)
    assert client.api_base == "https://hn.test/v0"
    assert client.batch_size == 3


def test_discovery_on_later_days_rolls_daily_counters(kv, facts_file, clock):
    facts = FactStore(facts_file)
    facts.load()

    for day, fact in enumerate(facts.facts):
        if day:
            clock.advance(days=1)
        c = {
            "kv": kv,
            "facts": facts,
            "progress": ProgressTracker(kv, clock=clock),
            "journey": JourneyTracker(kv, clock=clock),
        }
        assert discover_fact(c, fact) is True

    state = c["journey"].state
    assert state.daily_discoveries == 1
    assert state.current_streak == 4
    assert state.total_days_engaged == 4
    assert state.has_achievement("first_visit")
    assert state.has_achievement("streak_3")
    assert not state.has_achievement("daily_5")
