"""RSS 2.0 feed builder."""

import logging
import re
from datetime import datetime
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence
from xml.sax.saxutils import escape, quoteattr

import pendulum

from ..config import FeedConfig
from ..errors import GenerationError
from ..models import Asset, Entry, EntryCollection
from .excerpt import extract_excerpt
from .models import Enclosure, FeedChannel, FeedItem

logger = logging.getLogger(__name__)

RFC1123_FORMAT = "ddd, DD MMM YYYY HH:mm:ss [GMT]"
UNTITLED = "Untitled"

NAMESPACES = {
    "atom": "http://www.w3.org/2005/Atom",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "media": "http://search.yahoo.com/mrss/",
}

# Characters not allowed anywhere in an XML 1.0 document
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def format_rfc1123(value: datetime) -> str:
    """Format a timestamp as an RFC 1123 date in UTC."""
    return pendulum.instance(value).in_timezone("UTC").format(RFC1123_FORMAT)


def build_asset_map(assets: Iterable[Asset]) -> Mapping[str, Asset]:
    """Build a read-only asset lookup keyed by asset ID."""
    return MappingProxyType({asset.id: asset for asset in assets})


def _clean(text: str) -> str:
    return _ILLEGAL_XML_CHARS.sub("", text)


def cdata(text: str) -> str:
    """Wrap text in a CDATA section, splitting any embedded terminator."""
    return "<![CDATA[" + _clean(text).replace("]]>", "]]]]><![CDATA[>") + "]]>"


def escape_text(value: str) -> str:
    """Escape text for use as element content."""
    return escape(_clean(value))


class FeedBuilder:
    """Build an RSS 2.0 document from fetched entries."""

    def __init__(self, config: FeedConfig) -> None:
        """
        Initialize feed builder.

        Args:
            config: Service configuration (site URL and channel metadata)
        """
        self.config = config

    def article_url(self, slug: str) -> str:
        """Canonical URL of an article."""
        return f"{self.config.site_url}/{slug}"

    def build_enclosure(self, entry: Entry, assets: Mapping[str, Asset]) -> Optional[Enclosure]:
        """Resolve the cover visual of an entry, if any."""
        cover = entry.fields.cover_visual
        if cover is None:
            return None

        asset = assets.get(cover.id)
        if asset is None or asset.fields.file is None or not asset.fields.file.url:
            logger.debug("Entry %s references unresolved asset %s", entry.id, cover.id)
            return None

        file = asset.fields.file
        return Enclosure(url=file.absolute_url, type=file.mime_type, length=file.size)

    def build_item(self, entry: Entry, assets: Mapping[str, Asset]) -> FeedItem:
        """Map one entry to a feed item."""
        fields = entry.fields
        link = self.article_url(fields.slug)

        description = extract_excerpt(fields.content) if fields.content is not None else ""
        if not description:
            description = fields.title or self.config.channel.placeholder_description

        pub_date = None
        if fields.publication_date is not None:
            pub_date = format_rfc1123(fields.publication_date)

        return FeedItem(
            title=fields.title or UNTITLED,
            link=link,
            pub_date=pub_date,
            description=description,
            enclosure=self.build_enclosure(entry, assets),
            category=fields.category_tag or None,
        )

    def build_channel(
        self,
        entries: Sequence[Entry],
        assets: Iterable[Asset],
        build_date: Optional[datetime] = None,
    ) -> FeedChannel:
        """
        Build the channel and its items.

        The asset map is complete before the first item is built. Items
        keep the order of entries.

        Args:
            entries: Entries, newest first
            assets: Assets delivered with the entries
            build_date: Time of generation, defaults to now

        Returns:
            Channel with one item per entry
        """
        asset_map = build_asset_map(assets)
        items = [self.build_item(entry, asset_map) for entry in entries]

        if build_date is None:
            build_date = pendulum.now("UTC")

        channel = self.config.channel
        return FeedChannel(
            title=channel.title,
            link=self.config.site_url,
            description=channel.description,
            language=channel.language,
            last_build_date=format_rfc1123(build_date),
            self_link=channel.self_link,
            items=items,
        )

    def build(
        self,
        entries: Sequence[Entry],
        assets: Iterable[Asset],
        build_date: Optional[datetime] = None,
    ) -> str:
        """Build the complete RSS document."""
        try:
            channel = self.build_channel(entries, assets, build_date)
            return render_rss(channel)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Failed to build RSS feed: {e}") from e

    def build_from_collection(
        self,
        collection: EntryCollection,
        build_date: Optional[datetime] = None,
    ) -> str:
        """Build the RSS document for a fetched entry collection."""
        return self.build(collection.items, collection.includes.assets, build_date)


def render_item(item: FeedItem) -> str:
    """Serialize one item."""
    lines = []
    lines.append("    <item>")
    lines.append(f"      <title>{cdata(item.title)}</title>")
    lines.append(f"      <link>{escape_text(item.link)}</link>")
    lines.append(f'      <guid isPermaLink="true">{escape_text(item.guid)}</guid>')
    if item.pub_date:
        lines.append(f"      <pubDate>{item.pub_date}</pubDate>")
    lines.append(f"      <description>{cdata(item.description)}</description>")
    if item.enclosure:
        enclosure = item.enclosure
        lines.append(
            f"      <enclosure url={quoteattr(_clean(enclosure.url))} "
            f"type={quoteattr(_clean(enclosure.type))} length=\"{enclosure.length}\" />"
        )
    if item.category:
        lines.append(f"      <category>{escape_text(item.category)}</category>")
    lines.append("    </item>")
    return "\n".join(lines)


def render_rss(channel: FeedChannel) -> str:
    """Serialize a channel as an RSS 2.0 document."""
    namespaces = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items())

    lines = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<rss version="2.0" {namespaces}>')
    lines.append("  <channel>")
    lines.append(f"    <title>{escape_text(channel.title)}</title>")
    lines.append(f"    <link>{escape_text(channel.link)}</link>")
    lines.append(f"    <description>{escape_text(channel.description)}</description>")
    lines.append(f"    <language>{escape_text(channel.language)}</language>")
    lines.append(f"    <lastBuildDate>{channel.last_build_date}</lastBuildDate>")
    lines.append(
        f"    <atom:link href={quoteattr(_clean(channel.self_link))} "
        f'rel="self" type="application/rss+xml" />'
    )

    for item in channel.items:
        lines.append(render_item(item))

    lines.append("  </channel>")
    lines.append("</rss>")
    lines.append("")

    return "\n".join(lines)
