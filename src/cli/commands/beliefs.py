"""Belief evolution CLI commands."""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, last_fact

console = Console()


@click.group()
def beliefs():
    """Track how your positions change."""
    pass


@beliefs.command("list")
@click.pass_context
def beliefs_list(ctx):
    """List tracked beliefs."""
    c = get_components(ctx.obj.get("config_path"))
    tracker = c["beliefs"]
    if not tracker.beliefs:
        console.print("[yellow]No beliefs tracked yet.[/]")
        return

    table = Table(show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Topic", style="cyan")
    table.add_column("Started")
    table.add_column("Now")
    table.add_column("Changes", justify="right")
    for b in tracker.beliefs:
        table.add_row(b.id, b.topic, b.initial_position, b.current_position, str(len(tracker.changes_for(b.id))))
    console.print(table)


@beliefs.command("add")
@click.argument("topic")
@click.argument("position")
@click.pass_context
def beliefs_add(ctx, topic: str, position: str):
    """Start tracking a belief."""
    c = get_components(ctx.obj.get("config_path"))
    belief = c["beliefs"].add_belief(topic, position)
    console.print(f"[green]Tracking[/] {belief.topic} [dim]({belief.id})[/]")


@beliefs.command("update")
@click.argument("belief_id")
@click.argument("position")
@click.option("--because", "trigger", default=None, help="What changed your mind (defaults to last fact)")
@click.pass_context
def beliefs_update(ctx, belief_id: str, position: str, trigger: Optional[str]):
    """Record a new position for a belief."""
    c = get_components(ctx.obj.get("config_path"))
    if trigger is None:
        recent = last_fact(c)
        trigger = recent.text if recent else None

    change = c["beliefs"].update_belief(belief_id, position, trigger_fact=trigger)
    if change is None:
        console.print(f"[red]Unknown belief:[/] {belief_id}")
        sys.exit(1)
    console.print(f"[green]Updated:[/] {change.from_position} → {change.to_position}")


@beliefs.command("history")
@click.argument("belief_id")
@click.pass_context
def beliefs_history(ctx, belief_id: str):
    """Show the change history of a belief."""
    c = get_components(ctx.obj.get("config_path"))
    belief = c["beliefs"].get(belief_id)
    if belief is None:
        console.print(f"[red]Unknown belief:[/] {belief_id}")
        sys.exit(1)

    console.print(f"[bold]{belief.topic}[/]  started {belief.date_added:%Y-%m-%d}: {belief.initial_position}")
    for change in c["beliefs"].changes_for(belief_id):
        line = f"  {change.date:%Y-%m-%d}  {change.from_position} → {change.to_position}"
        if change.trigger_fact:
            line += f"  [dim]({change.trigger_fact})[/]"
        console.print(line)
