"""Fact browsing CLI commands."""

import sys
from datetime import datetime

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cli.utils import discover_fact, get_components, last_fact

console = Console()

STATE_STYLE = {
    "locked": "[dim]locked[/]",
    "in_progress": "[yellow]in progress[/]",
    "completed": "[green]completed[/]",
}


def render_fact(fact, title: str = "Contrary Fact") -> Panel:
    body = f"[bold]{fact.text}[/bold]"
    if fact.contrary_insight:
        body += f"\n\n[cyan]{fact.contrary_insight}[/cyan]"
    if fact.source:
        body += f"\n\n[dim]- {fact.source}[/dim]"
    return Panel(body, title=f"{title} · {fact.category}", border_style="magenta")


@click.command()
@click.option("-c", "--category", default="all", help="Category key, or 'all'")
@click.pass_context
def fact(ctx, category: str):
    """Show a random contrary fact and record the discovery."""
    c = get_components(ctx.obj.get("config_path"))
    store = c["facts"]
    store.current_fact = last_fact(c)

    picked = store.random_fact(category)
    if picked is None:
        console.print(f"[red]{store.error_message}[/]")
        sys.exit(1)
    if category != "all" and store.selected_category == "all":
        console.print(f"[yellow]No facts in '{category}', showing any category.[/]")

    is_new = discover_fact(c, picked)
    console.print(render_fact(picked))
    console.print(f"[dim]id {picked.id}[/]", soft_wrap=True)
    if is_new:
        journey = c["journey"].state
        console.print(f"[green]+ New discovery[/] [dim]({journey.experience_points} XP)[/]")
    if c["favorites"].is_favorite(picked):
        console.print("[magenta]★ In your favorites[/]")


@click.command()
@click.pass_context
def daily(ctx):
    """Show today's fact."""
    c = get_components(ctx.obj.get("config_path"))
    today = c["daily"].todays_fact(c["facts"], datetime.now())
    if today is None:
        console.print("[yellow]No facts available.[/]")
        return
    fact_obj = c["facts"].get(today.fact_id)
    if fact_obj is not None:
        console.print(render_fact(fact_obj, title=f"Fact of the Day {today.date:%Y-%m-%d}"))
    else:
        console.print(Panel(today.text, title=f"Fact of the Day {today.date:%Y-%m-%d}"))


@click.command()
@click.pass_context
def categories(ctx):
    """List categories with discovery state."""
    c = get_components(ctx.obj.get("config_path"))
    counts = c["facts"].category_counts()

    table = Table(show_header=True, title="Categories")
    table.add_column("Key", style="dim")
    table.add_column("Category", style="cyan")
    table.add_column("Group")
    table.add_column("Discovered", justify="right")
    table.add_column("State")

    for cat in c["facts"].categories:
        state = c["progress"].category_state(cat.key, counts.get(cat.key, 0))
        table.add_row(
            cat.key,
            cat.display_name,
            cat.group.display_name,
            f"{state.discovered}/{state.total}",
            STATE_STYLE[state.status.value],
        )
    console.print(table)
