"""Request pipeline."""

from .feed_pipeline import FeedPipeline

__all__ = ["FeedPipeline"]
