"""Progress, streak and achievement CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()

RARITY_STYLE = {
    "common": "dim",
    "rare": "blue",
    "epic": "magenta",
    "legendary": "yellow",
}


def _bar(ratio: float, width: int = 20) -> str:
    filled = int(round(ratio * width))
    return "█" * filled + "░" * (width - filled)


@click.command()
@click.pass_context
def visit(ctx):
    """Check in for today and update the streak."""
    c = get_components(ctx.obj.get("config_path"))
    journey = c["journey"]
    before = len(journey.achievements)
    journey.check_daily_visit()
    s = journey.state

    console.print(
        f"Streak: [bold]{s.current_streak}[/] day(s)  |  Longest: {s.longest_streak}  |  "
        f"Days engaged: {s.total_days_engaged}"
    )
    console.print(f"Level: [bold]{s.user_level.label}[/]  ({s.experience_points} XP)")
    for achievement in journey.achievements[before:]:
        console.print(f"[yellow]🏆 {achievement.name}[/]: {achievement.description}")


@click.command()
@click.pass_context
def progress(ctx):
    """Overall and per-category discovery progress."""
    c = get_components(ctx.obj.get("config_path"))
    facts = c["facts"]
    tracker = c["progress"]
    counts = facts.category_counts()

    overall = tracker.overall_progress(len(facts.facts))
    console.print(
        f"\n  Discovered [bold]{tracker.total_discovered}[/] of {len(facts.facts)} facts  "
        f"{_bar(overall)} {overall * 100:.0f}%"
    )
    console.print(f"  Categories explored: {tracker.categories_with_progress()} of {len(facts.categories)}\n")

    table = Table(show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Progress")
    table.add_column("Count", justify="right")
    for cat in facts.categories:
        total = counts.get(cat.key, 0)
        state = tracker.category_state(cat.key, total)
        ratio = state.discovered / total if total else 0.0
        table.add_row(cat.display_name, _bar(ratio, 12), f"{state.discovered}/{total}")
    console.print(table)


@click.command()
@click.pass_context
def journey(ctx):
    """Level, experience, stage, weekly goal and achievements."""
    c = get_components(ctx.obj.get("config_path"))
    tracker = c["journey"]
    s = tracker.state

    next_level = s.user_level.next_level()
    console.print(f"\n  [bold]{s.user_level.label}[/]  {s.experience_points} XP")
    if next_level:
        console.print(f"  Next: {next_level.label} at {next_level.required_xp} XP  {_bar(tracker.progress_to_next_level)}")
    console.print(f"  Stage: [cyan]{s.emotional_journey_stage.label}[/]: {s.emotional_journey_stage.description}")
    console.print(
        f"  Streak: {tracker.effective_streak} (longest {s.longest_streak})  |  "
        f"Weekly goal: {s.weekly_progress}/{s.weekly_goal}  |  Today: {s.daily_discoveries}\n"
    )

    if not tracker.achievements:
        console.print("[dim]No achievements yet. Run 'contrario visit' to start your journey.[/]")
        return

    table = Table(show_header=True, title="Achievements")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Rarity")
    table.add_column("Unlocked", style="dim")
    for a in tracker.achievements:
        style = RARITY_STYLE[a.rarity.value]
        table.add_row(a.name, a.description, f"[{style}]{a.rarity.value}[/]", a.unlocked_date.strftime("%Y-%m-%d"))
    console.print(table)
