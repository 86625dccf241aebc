"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import FeedConfig, load_config
from ..log import setup_logging

console = Console(stderr=True)


def load_cli_config(config_path: Optional[Path]) -> FeedConfig:
    """Load configuration and set up logging, exiting on invalid settings."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    setup_logging(config.log_level)
    return config


def write_output(content: str, output: Optional[Path]) -> None:
    """Write content to a file, or to stdout when no file is given."""
    if output is None:
        typer.echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    console.print(f"[green]✓ Saved: {output}[/green]")
