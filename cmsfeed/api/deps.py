"""Request dependencies."""

from fastapi import Request

from ..config import FeedConfig
from ..pipeline import FeedPipeline


def get_config(request: Request) -> FeedConfig:
    """Configuration the app was created with."""
    return request.app.state.config


def get_pipeline(request: Request) -> FeedPipeline:
    """Fresh pipeline for the current request."""
    return FeedPipeline(request.app.state.config, transport=request.app.state.transport)
