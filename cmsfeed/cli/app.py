"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_command
from .rss import rss_command
from .serve import serve_command

app = typer.Typer(
    name="cmsfeed",
    help="Contentful article proxy and RSS feed generator",
    no_args_is_help=True,
)

# Register commands
app.command("serve")(serve_command)
app.command("rss")(rss_command)
app.command("articles")(articles_command)


if __name__ == "__main__":
    app()
