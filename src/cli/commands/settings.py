"""Settings CLI commands."""

import sys

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()


@click.group()
def settings():
    """View and change preferences."""
    pass


@settings.command("show")
@click.pass_context
def settings_show(ctx):
    """Show current settings."""
    c = get_components(ctx.obj.get("config_path"))
    table = Table(show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in c["settings"].settings.model_dump(mode="json").items():
        table.add_row(key, str(value))
    console.print(table)


@settings.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def settings_set(ctx, key: str, value: str):
    """Set KEY to VALUE (e.g. dark_mode true, daily_fact_time 08:30)."""
    c = get_components(ctx.obj.get("config_path"))
    try:
        updated = c["settings"].update(**{key: value})
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)
    console.print(f"[green]{key}[/] = {getattr(updated, key)}")
