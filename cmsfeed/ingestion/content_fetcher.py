"""Contentful delivery API fetcher."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import FeedConfig
from ..errors import FetchError
from ..models import EntryCollection, parse_collection

logger = logging.getLogger(__name__)

ORDER_BY_PUBLICATION_DATE = "-fields.publicationDate"
BODY_SNIPPET_LENGTH = 500


class ContentFetcher:
    """Fetch a page of entries and their linked assets."""

    def __init__(
        self,
        config: FeedConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize content fetcher.

        Args:
            config: Service configuration with Contentful credentials
            transport: Custom httpx transport (for testing)
        """
        self.config = config
        self.transport = transport

    @property
    def entries_url(self) -> str:
        """Entries endpoint for the configured space and environment."""
        return (
            f"{self.config.cdn_base_url}/spaces/{self.config.space_id}"
            f"/environments/{self.config.environment}/entries"
        )

    def build_params(self, limit: Optional[int] = None) -> Dict[str, Any]:
        """Query parameters for the entries request."""
        params: Dict[str, Any] = {
            "content_type": self.config.content_type,
            "order": ORDER_BY_PUBLICATION_DATE,
        }
        if limit is not None:
            params["limit"] = limit
        return params

    def build_headers(self) -> Dict[str, str]:
        """Request headers carrying the access token."""
        return {"Authorization": f"Bearer {self.config.access_token}"}

    async def fetch_raw(self, limit: Optional[int] = None) -> Dict[str, Any]:
        """
        Fetch entries and return the upstream JSON as is.

        Makes exactly one request. Credentials are checked before it.

        Args:
            limit: Maximum number of entries, or None for the upstream default

        Returns:
            Decoded JSON body

        Raises:
            ConfigurationError: If credentials are missing
            FetchError: On transport failure, non-success status or non-JSON body
        """
        self.config.require_credentials()

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self.transport,
                headers=self.build_headers(),
            ) as client:
                response = await client.get(self.entries_url, params=self.build_params(limit))
        except httpx.HTTPError as e:
            logger.error("Contentful request failed: %s", e)
            raise FetchError(f"Contentful request failed: {e}") from e

        if not response.is_success:
            body = response.text[:BODY_SNIPPET_LENGTH]
            logger.error(
                "Contentful API error: status=%s reason=%s body=%s",
                response.status_code,
                response.reason_phrase,
                body,
            )
            raise FetchError(
                f"Contentful API error! status: {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(
                "Contentful API returned a non-JSON body",
                status_code=response.status_code,
                body=response.text[:BODY_SNIPPET_LENGTH],
            ) from e

        logger.debug("Fetched Contentful entries (status %s)", response.status_code)
        return data

    async def fetch_entries(self, limit: Optional[int] = None) -> EntryCollection:
        """Fetch entries and validate them into the content schema."""
        data = await self.fetch_raw(limit)
        return parse_collection(data)
