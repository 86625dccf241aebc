"""Tests for the HTTP endpoints."""

import logging
import xml.etree.ElementTree as ET

import httpx
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from cmsfeed.api import create_app

from .payloads import SITE_URL, collection_payload, entry_payload


def upstream(status_code=200, payload=None, text=None, calls=None):
    """Mock Contentful transport."""

    def handler(request):
        if calls is not None:
            calls.append(request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture
def client_for(config):
    def make(transport, app_config=None):
        return TestClient(create_app(app_config or config, transport=transport))

    return make


class TestCreateApp:
    """Tests for the application factory."""

    def test_sets_up_logging_when_loading_config(self, config):
        with patch("cmsfeed.api.app.load_config", return_value=config), \
                patch("cmsfeed.api.app.setup_logging") as setup_logging:
            app = create_app()

        setup_logging.assert_called_once_with(config.log_level)
        assert app.state.config is config

    def test_leaves_logging_alone_with_given_config(self, config):
        with patch("cmsfeed.api.app.setup_logging") as setup_logging:
            create_app(config)

        setup_logging.assert_not_called()


class TestRoot:
    """Tests for the root endpoint."""

    def test_lists_endpoints(self, client_for, sample_payload):
        response = client_for(upstream(payload=sample_payload)).get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"] == ["/api/articles", "/api/rss"]


class TestArticlesEndpoint:
    """Tests for GET /api/articles."""

    def test_passes_upstream_json_through(self, client_for, sample_payload):
        calls = []
        response = client_for(upstream(payload=sample_payload, calls=calls)).get("/api/articles")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == sample_payload
        assert "limit" not in calls[0].url.params

    def test_sets_cache_header(self, client_for, sample_payload):
        response = client_for(upstream(payload=sample_payload)).get("/api/articles")

        assert response.headers["cache-control"] == "s-maxage=300, stale-while-revalidate"

    def test_upstream_error_returns_minimal_body(self, client_for, caplog):
        transport = upstream(401, text='{"message": "The access token you sent could not be found"}')

        with caplog.at_level(logging.ERROR):
            response = client_for(transport).get("/api/articles")

        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching articles."}
        assert "access token" not in response.text
        assert "access token" in caplog.text

    def test_missing_credentials(self, client_for, unconfigured, sample_payload):
        calls = []

        response = client_for(upstream(payload=sample_payload, calls=calls), unconfigured).get("/api/articles")

        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error: Missing Contentful credentials"}
        assert calls == []

    def test_no_cache_header_on_error(self, client_for):
        response = client_for(upstream(500, text="boom")).get("/api/articles")

        assert "cache-control" not in response.headers


class TestRssEndpoint:
    """Tests for GET /api/rss."""

    def test_returns_rss_document(self, client_for, sample_payload):
        calls = []

        response = client_for(upstream(payload=sample_payload, calls=calls)).get("/api/rss")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/rss+xml; charset=utf-8"
        channel = ET.fromstring(response.content).find("channel")
        links = [item.findtext("link") for item in channel.findall("item")]
        assert links == [f"{SITE_URL}/second-post", f"{SITE_URL}/hello-world"]
        assert calls[0].url.params["limit"] == "20"
        assert calls[0].url.params["order"] == "-fields.publicationDate"

    def test_uses_configured_feed_limit(self, client_for, config, sample_payload):
        calls = []
        small = config.model_copy(update={"feed_limit": 5})

        client_for(upstream(payload=sample_payload, calls=calls), small).get("/api/rss")

        assert calls[0].url.params["limit"] == "5"

    def test_upstream_404(self, client_for):
        response = client_for(upstream(404, text="Not Found")).get("/api/rss")

        assert response.status_code == 500
        assert response.text == "Error generating RSS feed."
        assert response.headers["content-type"].startswith("text/plain")
        assert "<rss" not in response.text

    def test_malformed_payload(self, client_for):
        entry = entry_payload("e1", slug="s")
        del entry["fields"]["slug"]

        response = client_for(upstream(payload=collection_payload([entry]))).get("/api/rss")

        assert response.status_code == 500
        assert response.text == "Error generating RSS feed."

    def test_missing_credentials(self, client_for, unconfigured, sample_payload):
        calls = []

        response = client_for(upstream(payload=sample_payload, calls=calls), unconfigured).get("/api/rss")

        assert response.status_code == 500
        assert response.text == "Server configuration error: Missing Contentful credentials"
        assert calls == []

    def test_each_request_fetches_again(self, client_for, sample_payload):
        calls = []
        client = client_for(upstream(payload=sample_payload, calls=calls))

        client.get("/api/rss")
        client.get("/api/rss")

        assert len(calls) == 2
