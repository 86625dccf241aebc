"""Fetch-then-build pipeline behind the JSON and RSS endpoints."""

import logging
import time
from typing import Any, Dict, Optional

import httpx

from ..config import FeedConfig
from ..generation import FeedBuilder
from ..ingestion import ContentFetcher

logger = logging.getLogger(__name__)


class FeedPipeline:
    """
    Run one invocation: a single fetch followed by a single transform.

    Nothing is cached between invocations; every call fetches fresh
    content and, for the feed, stamps a new build date.
    """

    def __init__(
        self,
        config: FeedConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            config: Service configuration
            transport: Custom httpx transport (for testing)
        """
        self.config = config
        self.fetcher = ContentFetcher(config, transport=transport)
        self.builder = FeedBuilder(config)

    async def articles(self) -> Dict[str, Any]:
        """Fetch all published articles as raw upstream JSON."""
        return await self.fetcher.fetch_raw()

    async def rss(self, limit: Optional[int] = None) -> str:
        """
        Fetch the newest articles and build the RSS document.

        Args:
            limit: Number of entries, defaults to the configured feed limit

        Returns:
            RSS 2.0 XML document
        """
        start_time = time.time()

        collection = await self.fetcher.fetch_entries(limit or self.config.feed_limit)
        feed = self.builder.build_from_collection(collection)

        logger.info(
            "Generated RSS feed with %d items in %.2fs",
            len(collection.items),
            time.time() - start_time,
        )
        return feed
