"""Articles command implementation."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from ..errors import CmsFeedError
from ..pipeline import FeedPipeline
from .common import console, load_cli_config, write_output


def articles_command(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON to this file"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Fetch all published articles as raw JSON."""
    config = load_cli_config(config_path)

    try:
        data = asyncio.run(FeedPipeline(config).articles())
    except CmsFeedError as e:
        console.print(f"[red]Error fetching articles: {e}[/red]")
        raise typer.Exit(1)

    write_output(json.dumps(data, indent=2, ensure_ascii=False) + "\n", output)
