"""Content ingestion from the delivery API."""

from .content_fetcher import ContentFetcher

__all__ = [
    "ContentFetcher",
]
