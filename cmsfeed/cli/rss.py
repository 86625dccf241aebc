"""RSS command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ..errors import CmsFeedError
from ..pipeline import FeedPipeline
from .common import console, load_cli_config, write_output


def rss_command(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the feed to this file"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Number of entries. Default: from config"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Fetch the newest articles and print the RSS feed."""
    config = load_cli_config(config_path)

    try:
        feed = asyncio.run(FeedPipeline(config).rss(limit))
    except CmsFeedError as e:
        console.print(f"[red]Error generating RSS feed: {e}[/red]")
        raise typer.Exit(1)

    write_output(feed, output)
