"""Shared fixtures."""

import pytest

from cmsfeed.config import FeedConfig

from .payloads import SITE_URL, asset_payload, collection_payload, document, entry_payload, paragraph


@pytest.fixture
def config():
    return FeedConfig(
        space_id="space123",
        access_token="token456",
        site_url=SITE_URL,
    )


@pytest.fixture
def unconfigured():
    return FeedConfig(site_url=SITE_URL)


@pytest.fixture
def sample_payload():
    """Two articles, newest first, the first with a cover image."""
    return collection_payload(
        entries=[
            entry_payload(
                "entry-2",
                slug="second-post",
                title="Second post",
                publication_date="2024-03-15T09:30:00+01:00",
                content=document(paragraph("Fresh news.")),
                cover_id="asset-1",
                category="Culture",
            ),
            entry_payload(
                "entry-1",
                slug="hello-world",
                title="Hello",
                publication_date="2024-01-01T00:00:00Z",
            ),
        ],
        assets=[asset_payload("asset-1")],
    )
