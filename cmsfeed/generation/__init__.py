"""RSS feed generation."""

from .excerpt import ELLIPSIS, EXCERPT_LENGTH, extract_excerpt
from .models import Enclosure, FeedChannel, FeedItem
from .rss import FeedBuilder, build_asset_map, format_rfc1123, render_rss

__all__ = [
    "FeedBuilder",
    "FeedChannel",
    "FeedItem",
    "Enclosure",
    "ELLIPSIS",
    "EXCERPT_LENGTH",
    "build_asset_map",
    "extract_excerpt",
    "format_rfc1123",
    "render_rss",
]
