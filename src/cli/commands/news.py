"""Hacker News CLI commands."""

import asyncio
import sys

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, get_news_client
from news import NewsFetchError
from shared_types import StoryType

console = Console()

FEEDS = ["top", "best", "new", "ask", "show"]


@click.group(invoke_without_command=True)
@click.option("-t", "--type", "feed", default="top", type=click.Choice(FEEDS), help="Feed to show")
@click.option("-n", "--limit", default=None, type=int, help="Max stories")
@click.option("--refresh", is_flag=True, help="Forget stories already loaded this session")
@click.pass_context
def news(ctx, feed: str, limit: int | None, refresh: bool):
    """Browse Hacker News stories."""
    if ctx.invoked_subcommand is not None:
        return

    c = get_components(ctx.obj.get("config_path"))
    story_type = StoryType.from_name(feed)
    limit = limit or c["config_model"].news.default_limit

    async def _load():
        async with get_news_client(c["config_model"]) as client:
            if refresh:
                return await client.refresh(story_type, limit=limit)
            return await client.load_stories(story_type, limit=limit)

    try:
        stories = asyncio.run(_load())
    except NewsFetchError as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)

    if not stories:
        console.print("[yellow]No stories returned.[/]")
        return

    table = Table(show_header=True, title=f"Hacker News · {story_type.display_name}")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Title")
    table.add_column("Site", style="dim")
    table.add_column("Comments", justify="right")
    table.add_column("ID", style="dim")
    for s in stories:
        table.add_row(str(s.score), s.title, s.domain or "", str(s.comment_count), str(s.id))
    console.print(table)


@news.command("comments")
@click.argument("story_id", type=int)
@click.pass_context
def news_comments(ctx, story_id: int):
    """Show top-level comments for a story."""
    c = get_components(ctx.obj.get("config_path"))
    config_model = c["config_model"]

    async def _load():
        async with get_news_client(config_model) as client:
            return await client.load_comments(story_id, limit=config_model.news.comment_limit)

    comments = asyncio.run(_load())
    if not comments:
        console.print("[yellow]No comments found.[/]")
        return

    for comment in comments:
        author = comment.by or "(deleted)"
        console.print(f"[cyan]{author}[/] [dim]{comment.published:%Y-%m-%d %H:%M}[/]")
        console.print(f"  {comment.text or ''}\n")
