"""Data models for content fetched from Contentful."""

from .asset import Asset, AssetFields, AssetFile, FileDetails
from .base import ContentModel, Link, SysInfo
from .entry import Entry, EntryCollection, EntryFields, Includes, parse_collection
from .rich_text import RichTextDocument, RichTextNode

__all__ = [
    "Asset",
    "AssetFields",
    "AssetFile",
    "ContentModel",
    "Entry",
    "EntryCollection",
    "EntryFields",
    "FileDetails",
    "Includes",
    "Link",
    "RichTextDocument",
    "RichTextNode",
    "SysInfo",
    "parse_collection",
]
