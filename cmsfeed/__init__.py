"""Contentful article proxy and RSS feed generator."""

__version__ = "1.0.0"
