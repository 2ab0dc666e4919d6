"""Favorites CLI commands."""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, last_fact

console = Console()


def resolve_fact(c: dict, ref: str):
    """Find a fact by full id, favorites list number, or unique id prefix.

    Raises:
        LookupError: the prefix matches more than one fact.
    """
    saved = c["favorites"].favorites
    exact = c["facts"].get(ref) or next((f for f in saved if f.id == ref), None)
    if exact is not None:
        return exact
    if ref.isdigit():
        index = int(ref)
        return saved[index - 1] if 1 <= index <= len(saved) else None

    matches = {f.id: f for f in [*c["facts"].facts, *saved] if f.id.startswith(ref)}
    if len(matches) > 1:
        raise LookupError(f"Ambiguous id '{ref}' matches {len(matches)} facts")
    return next(iter(matches.values()), None)


@click.group()
def favorites():
    """Manage saved facts."""
    pass


@favorites.command("list")
@click.pass_context
def favorites_list(ctx):
    """List saved facts."""
    c = get_components(ctx.obj.get("config_path"))
    saved = c["favorites"].favorites
    if not saved:
        console.print("[yellow]No favorites yet.[/]")
        return

    table = Table(show_header=True, title=f"Favorites ({len(saved)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Fact")
    table.add_column("Category", style="cyan")
    table.add_column("ID", style="dim", overflow="fold")
    for i, f in enumerate(saved, 1):
        table.add_row(str(i), f.text, f.category, f.id)
    console.print(table)


@favorites.command("toggle")
@click.argument("fact_ref", required=False)
@click.pass_context
def favorites_toggle(ctx, fact_ref: Optional[str]):
    """Add or remove a fact by id, list number or id prefix.

    Defaults to the last fact shown.
    """
    c = get_components(ctx.obj.get("config_path"))
    if fact_ref:
        try:
            target = resolve_fact(c, fact_ref)
        except LookupError as e:
            console.print(f"[red]{e}.[/] Pass the full id or the list number.")
            sys.exit(1)
    else:
        target = last_fact(c)

    if target is None:
        console.print("[red]No such fact.[/] Run 'contrario fact' first or pass a fact id.")
        sys.exit(1)

    if c["favorites"].toggle(target):
        console.print(f"[magenta]★ Saved:[/] {target.text}")
    else:
        console.print(f"[dim]Removed:[/] {target.text}")


@favorites.command("clear")
@click.confirmation_option(prompt="Remove all favorites?")
@click.pass_context
def favorites_clear(ctx):
    """Remove all favorites."""
    c = get_components(ctx.obj.get("config_path"))
    count = len(c["favorites"])
    c["favorites"].clear()
    console.print(f"[green]Removed {count} favorite(s).[/]")
