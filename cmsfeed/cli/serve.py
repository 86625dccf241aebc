"""Serve command implementation."""

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from ..api import create_app
from .common import console, load_cli_config


def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address. Default: from config"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port. Default: from config"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Run the HTTP API."""
    config = load_cli_config(config_path)

    missing = config.missing_credentials()
    if missing:
        console.print(f"[yellow]Warning: {', '.join(missing)} not set; endpoints will return errors.[/yellow]")

    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
        log_config=None,
    )
