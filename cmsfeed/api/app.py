"""FastAPI application factory."""

from typing import Optional

import httpx
from fastapi import FastAPI

from .. import __version__
from ..config import FeedConfig, load_config
from ..log import setup_logging
from .routers import articles, rss


def create_app(
    config: Optional[FeedConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create the API application.

    Args:
        config: Service configuration. When not given it is loaded from the
            environment and logging is set up from it (uvicorn --factory).
        transport: Custom httpx transport for upstream requests (for testing)

    Returns:
        Configured FastAPI app
    """
    if config is None:
        config = load_config()
        setup_logging(config.log_level)

    app = FastAPI(
        title="cmsfeed",
        description="Contentful article listing and RSS feed",
        version=__version__,
    )
    app.state.config = config
    app.state.transport = transport

    app.include_router(articles.router)
    app.include_router(rss.router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "cmsfeed",
            "version": __version__,
            "endpoints": ["/api/articles", "/api/rss"],
        }

    return app
