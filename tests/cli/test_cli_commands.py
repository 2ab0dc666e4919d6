"""CLI command tests using Click CliRunner.

Strategy: patch get_components at each command module's import point so every
command shares one set of in-memory stores.
"""

import importlib
import os
import random
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from click.testing import CliRunner
from rich.console import Console

from beliefs import BeliefTracker
from cli.config_models import ContrarioConfig
from cli.main import cli
from facts import DailyFactStore, Fact, FactStore
from favorites import FavoritesStore
from journey import JourneyTracker
from news import HNClient
from progress import ProgressTracker
from settings import SettingsStore
from storage import StorageKeys

COMMAND_MODULES = ["facts", "journey", "favorites", "beliefs", "settings", "news"]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def components(kv, facts_file, clock):
    facts = FactStore(facts_file, rng=random.Random(7))
    facts.load()
    return {
        "config_model": ContrarioConfig(),
        "kv": kv,
        "facts": facts,
        "daily": DailyFactStore(kv),
        "favorites": FavoritesStore(kv),
        "progress": ProgressTracker(kv, clock=clock),
        "journey": JourneyTracker(kv, clock=clock),
        "beliefs": BeliefTracker(kv, clock=clock),
        "settings": SettingsStore(kv),
    }


@pytest.fixture
def patch_components(components):
    """Patch get_components everywhere it's imported, and keep logging config untouched.

    Command modules share names with their click commands, so patch the
    module objects directly. A wide console keeps table cells on one line.
    """
    modules = [importlib.import_module(f"cli.commands.{name}") for name in COMMAND_MODULES]
    patches = []
    for module in modules:
        patches.append(patch.object(module, "get_components", return_value=components))
        patches.append(patch.object(module, "console", Console(width=200)))
    patches.append(patch("cli.main.setup_logging"))
    patches.append(patch("cli.main.load_config_model", return_value=ContrarioConfig()))
    for p in patches:
        p.start()
    yield components
    for p in patches:
        p.stop()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_bad_config_exits(runner, tmp_path):
    path = tmp_path / "contrario.yaml"
    path.write_text("journey: [unclosed")
    result = runner.invoke(cli, ["--config", str(path), "categories"])
    assert result.exit_code == 1
    assert "Config error" in result.output


# -- Fact commands --


class TestFactCommands:
    def test_fact_records_discovery(self, runner, patch_components):
        result = runner.invoke(cli, ["fact"])
        assert result.exit_code == 0
        assert "New discovery" in result.output

        c = patch_components
        assert c["progress"].total_discovered == 1
        assert c["journey"].state.daily_discoveries == 1
        assert c["kv"].get_json(StorageKeys.LAST_FACT_ID) in {f.id for f in c["facts"].facts}

    def test_fact_by_category(self, runner, patch_components):
        result = runner.invoke(cli, ["fact", "-c", "philosophy"])
        assert result.exit_code == 0
        assert "Boredom" in result.output

    def test_fact_unknown_category_falls_back(self, runner, patch_components):
        result = runner.invoke(cli, ["fact", "-c", "astrology"])
        assert result.exit_code == 0
        assert "showing any category" in result.output

    def test_repeat_fact_not_new(self, runner, patch_components):
        runner.invoke(cli, ["fact", "-c", "philosophy"])
        result = runner.invoke(cli, ["fact", "-c", "philosophy"])
        assert result.exit_code == 0
        assert "New discovery" not in result.output
        assert patch_components["journey"].state.daily_discoveries == 1

    def test_fact_shows_full_id(self, runner, patch_components):
        result = runner.invoke(cli, ["fact"])
        assert result.exit_code == 0
        assert patch_components["kv"].get_json(StorageKeys.LAST_FACT_ID) in result.output

    def test_fact_on_next_day_counts_as_visit(self, runner, patch_components, clock):
        runner.invoke(cli, ["fact", "-c", "philosophy"])
        clock.advance(days=1)
        result = runner.invoke(cli, ["fact", "-c", "technology"])
        assert result.exit_code == 0

        state = patch_components["journey"].state
        assert state.current_streak == 2
        assert state.total_days_engaged == 2
        assert state.daily_discoveries == 1

    def test_daily(self, runner, patch_components):
        result = runner.invoke(cli, ["daily"])
        assert result.exit_code == 0
        assert "Fact of the Day" in result.output
        assert patch_components["daily"].get() is not None

    def test_categories(self, runner, patch_components):
        result = runner.invoke(cli, ["categories"])
        assert result.exit_code == 0
        assert "Business & Startups" in result.output
        assert "locked" in result.output


# -- Journey commands --


class TestJourneyCommands:
    def test_visit(self, runner, patch_components):
        result = runner.invoke(cli, ["visit"])
        assert result.exit_code == 0
        assert "Streak: 1" in result.output
        assert "Welcome, Contrarian" in result.output

    def test_progress(self, runner, patch_components):
        runner.invoke(cli, ["fact", "-c", "philosophy"])
        result = runner.invoke(cli, ["progress"])
        assert result.exit_code == 0
        assert "Discovered 1 of 4 facts" in result.output
        assert "1/1" in result.output

    def test_journey_empty(self, runner, patch_components):
        result = runner.invoke(cli, ["journey"])
        assert result.exit_code == 0
        assert "Novice Questioner" in result.output
        assert "No achievements yet" in result.output

    def test_journey_lists_achievements(self, runner, patch_components):
        runner.invoke(cli, ["visit"])
        result = runner.invoke(cli, ["journey"])
        assert result.exit_code == 0
        assert "Welcome, Contrarian" in result.output


# -- Favorites commands --


def _shared_prefix_facts():
    return (
        Fact(text="The best founders ignore most advice", category="business"),
        Fact(text="The best products start as toys", category="business"),
    )


class TestFavoritesCommands:
    def test_toggle_without_last_fact(self, runner, patch_components):
        result = runner.invoke(cli, ["favorites", "toggle"])
        assert result.exit_code == 1
        assert "No such fact" in result.output

    def test_toggle_last_fact(self, runner, patch_components):
        runner.invoke(cli, ["fact", "-c", "philosophy"])
        result = runner.invoke(cli, ["favorites", "toggle"])
        assert result.exit_code == 0
        assert "Saved" in result.output
        assert len(patch_components["favorites"]) == 1

        result = runner.invoke(cli, ["favorites", "toggle"])
        assert "Removed" in result.output
        assert len(patch_components["favorites"]) == 0

    def test_toggle_by_id_and_list(self, runner, patch_components):
        fact = patch_components["facts"].facts_for_category("technology")[0]
        runner.invoke(cli, ["favorites", "toggle", fact.id])
        result = runner.invoke(cli, ["favorites", "list"])
        assert result.exit_code == 0
        assert "Favorites (1)" in result.output

    def test_list_shows_full_ids(self, runner, patch_components):
        first, second = _shared_prefix_facts()
        patch_components["favorites"].add(first)
        patch_components["favorites"].add(second)
        result = runner.invoke(cli, ["favorites", "list"])
        assert result.exit_code == 0
        assert first.id in result.output
        assert second.id in result.output

    def test_toggle_ambiguous_prefix_rejected(self, runner, patch_components):
        first, second = _shared_prefix_facts()
        patch_components["favorites"].add(first)
        patch_components["favorites"].add(second)
        prefix = os.path.commonprefix([first.id, second.id])

        result = runner.invoke(cli, ["favorites", "toggle", prefix])
        assert result.exit_code == 1
        assert "Ambiguous id" in result.output
        assert len(patch_components["favorites"]) == 2

    def test_toggle_by_list_number(self, runner, patch_components):
        first, second = _shared_prefix_facts()
        patch_components["favorites"].add(first)
        patch_components["favorites"].add(second)

        result = runner.invoke(cli, ["favorites", "toggle", "2"])
        assert result.exit_code == 0
        assert "Removed" in result.output
        assert patch_components["favorites"].favorites == [first]

    def test_toggle_unique_prefix(self, runner, patch_components):
        first, second = _shared_prefix_facts()
        patch_components["favorites"].add(first)
        patch_components["favorites"].add(second)

        result = runner.invoke(cli, ["favorites", "toggle", second.id[:30]])
        assert result.exit_code == 0
        assert patch_components["favorites"].favorites == [first]

    def test_list_empty(self, runner, patch_components):
        result = runner.invoke(cli, ["favorites", "list"])
        assert "No favorites yet" in result.output

    def test_clear(self, runner, patch_components):
        for fact in patch_components["facts"].facts:
            patch_components["favorites"].add(fact)
        result = runner.invoke(cli, ["favorites", "clear", "--yes"])
        assert result.exit_code == 0
        assert "Removed 4" in result.output
        assert len(patch_components["favorites"]) == 0


# -- Belief commands --


class TestBeliefCommands:
    def test_add_update_history(self, runner, patch_components):
        result = runner.invoke(cli, ["beliefs", "add", "Remote work", "Offices matter"])
        assert result.exit_code == 0
        belief = patch_components["beliefs"].beliefs[0]

        result = runner.invoke(cli, ["beliefs", "update", belief.id, "Offices optional", "--because", "a fact"])
        assert result.exit_code == 0
        assert "Offices optional" in result.output

        result = runner.invoke(cli, ["beliefs", "history", belief.id])
        assert result.exit_code == 0
        assert "Remote work" in result.output
        assert "a fact" in result.output

    def test_list(self, runner, patch_components):
        runner.invoke(cli, ["beliefs", "add", "Remote work", "Offices matter"])
        result = runner.invoke(cli, ["beliefs", "list"])
        assert result.exit_code == 0
        assert "Remote work" in result.output

    def test_update_uses_last_fact_as_trigger(self, runner, patch_components):
        runner.invoke(cli, ["fact", "-c", "philosophy"])
        belief = patch_components["beliefs"].add_belief("Boredom", "bad")
        runner.invoke(cli, ["beliefs", "update", belief.id, "useful"])
        change = patch_components["beliefs"].changes_for(belief.id)[0]
        assert change.trigger_fact.startswith("Boredom is")

    def test_update_unknown(self, runner, patch_components):
        result = runner.invoke(cli, ["beliefs", "update", "nope", "x"])
        assert result.exit_code == 1
        assert "Unknown belief" in result.output


# -- Settings commands --


class TestSettingsCommands:
    def test_show(self, runner, patch_components):
        result = runner.invoke(cli, ["settings", "show"])
        assert result.exit_code == 0
        assert "daily_fact_time" in result.output

    def test_set(self, runner, patch_components):
        result = runner.invoke(cli, ["settings", "set", "dark_mode", "true"])
        assert result.exit_code == 0
        assert patch_components["settings"].settings.dark_mode is True

    def test_set_invalid(self, runner, patch_components):
        result = runner.invoke(cli, ["settings", "set", "font_size", "12"])
        assert result.exit_code == 1
        assert "Unknown setting" in result.output


# -- News commands --


def _news_client(responses):
    http = AsyncMock()
    http.get.side_effect = responses
    return HNClient(api_base="https://hn.test/v0", client=http, max_attempts=1)


def _ok(data):
    return MagicMock(json=MagicMock(return_value=data))


class TestNewsCommands:
    def test_top_stories(self, runner, patch_components):
        client = _news_client([
            _ok([1]),
            _ok({"id": 1, "title": "Show me the code", "score": 42, "url": "https://www.example.com/x"}),
        ])
        with patch.object(importlib.import_module("cli.commands.news"), "get_news_client", return_value=client):
            result = runner.invoke(cli, ["news", "--limit", "1"])
        assert result.exit_code == 0
        assert "Show me the code" in result.output
        assert "example.com" in result.output

    def test_fetch_failure(self, runner, patch_components):
        client = _news_client([httpx.ConnectError("offline")])
        with patch.object(importlib.import_module("cli.commands.news"), "get_news_client", return_value=client):
            result = runner.invoke(cli, ["news", "--type", "new"])
        assert result.exit_code == 1
        assert "Failed to load stories" in result.output

    def test_comments(self, runner, patch_components):
        client = _news_client([
            _ok({"id": 1, "kids": [2]}),
            _ok({"id": 2, "by": "dang", "text": "Please keep it civil", "time": 1_700_000_000, "parent": 1}),
        ])
        with patch.object(importlib.import_module("cli.commands.news"), "get_news_client", return_value=client):
            result = runner.invoke(cli, ["news", "comments", "1"])
        assert result.exit_code == 0
        assert "dang" in result.output
        assert "Please keep it civil" in result.output
