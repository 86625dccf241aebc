"""Tests for the Contentful fetcher."""

import asyncio
import logging

import httpx
import pytest

from cmsfeed.errors import ConfigurationError, FetchError
from cmsfeed.ingestion import ContentFetcher
from cmsfeed.models import EntryCollection


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request."""

    def __init__(self, response: httpx.Response) -> None:
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return response

        super().__init__(handler)


class TestContentFetcher:
    """Tests for ContentFetcher."""

    def test_builds_entries_request(self, config, sample_payload):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        asyncio.run(ContentFetcher(config, transport=transport).fetch_raw(limit=20))

        (request,) = transport.requests
        assert request.method == "GET"
        assert request.url.host == "cdn.contentful.com"
        assert request.url.path == "/spaces/space123/environments/master/entries"
        assert request.headers["authorization"] == "Bearer token456"
        assert "access_token" not in request.url.params
        assert request.url.params["content_type"] == "article"
        assert request.url.params["order"] == "-fields.publicationDate"
        assert request.url.params["limit"] == "20"

    def test_token_stays_out_of_logs(self, config, sample_payload, caplog):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        with caplog.at_level(logging.DEBUG):
            asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        assert "token456" not in str(transport.requests[0].url)
        assert "token456" not in caplog.text

    def test_no_limit_by_default(self, config, sample_payload):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        assert "limit" not in transport.requests[0].url.params

    def test_fetch_raw_returns_upstream_json(self, config, sample_payload):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        data = asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        assert data == sample_payload

    def test_fetch_entries_validates_payload(self, config, sample_payload):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        collection = asyncio.run(ContentFetcher(config, transport=transport).fetch_entries(20))

        assert isinstance(collection, EntryCollection)
        assert [e.fields.slug for e in collection.items] == ["second-post", "hello-world"]

    def test_non_success_status_raises_fetch_error(self, config, caplog):
        body = '{"sys": {"type": "Error", "id": "NotFound"}, "message": "The resource could not be found."}'
        transport = RecordingTransport(httpx.Response(404, text=body))

        with caplog.at_level(logging.ERROR):
            with pytest.raises(FetchError) as exc_info:
                asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        assert exc_info.value.status_code == 404
        assert "NotFound" in exc_info.value.body
        assert "status=404" in caplog.text
        assert "NotFound" in caplog.text

    def test_makes_a_single_attempt(self, config):
        transport = RecordingTransport(httpx.Response(503, text="unavailable"))

        with pytest.raises(FetchError):
            asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        assert len(transport.requests) == 1

    def test_transport_error_raises_fetch_error(self, config):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = ContentFetcher(config, transport=httpx.MockTransport(handler))

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch_raw())

        assert exc_info.value.status_code is None

    def test_non_json_body_raises_fetch_error(self, config):
        transport = RecordingTransport(httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(FetchError, match="non-JSON"):
            asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

    def test_missing_credentials_fail_before_request(self, unconfigured, sample_payload):
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        with pytest.raises(ConfigurationError) as exc_info:
            asyncio.run(ContentFetcher(unconfigured, transport=transport).fetch_raw())

        assert exc_info.value.missing == ["CONTENTFUL_SPACE_ID", "CONTENTFUL_ACCESS_TOKEN"]
        assert transport.requests == []

    def test_custom_environment_and_base_url(self, config, sample_payload):
        config = config.model_copy(update={"environment": "staging", "cdn_base_url": "https://preview.contentful.com"})
        transport = RecordingTransport(httpx.Response(200, json=sample_payload))

        asyncio.run(ContentFetcher(config, transport=transport).fetch_raw())

        url = transport.requests[0].url
        assert url.host == "preview.contentful.com"
        assert url.path == "/spaces/space123/environments/staging/entries"
