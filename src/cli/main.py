"""Contrario command line interface."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import (
    beliefs,
    categories,
    daily,
    fact,
    favorites,
    journey,
    news,
    progress,
    settings,
    visit,
)
from cli.config import load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to config YAML",
)
@click.pass_context
def cli(ctx, verbose: bool, config_path: Path | None):
    """Contrario - contrary facts, one discovery at a time."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        config_model = load_config_model(config_path)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    log = config_model.logging
    setup_logging(
        json_mode=log.json_mode,
        level="DEBUG" if verbose else log.level,
        log_file=config_model.paths.log_file,
    )


cli.add_command(fact)
cli.add_command(daily)
cli.add_command(categories)
cli.add_command(visit)
cli.add_command(progress)
cli.add_command(journey)
cli.add_command(favorites)
cli.add_command(beliefs)
cli.add_command(settings)
cli.add_command(news)


def main():
    cli()


if __name__ == "__main__":
    main()
