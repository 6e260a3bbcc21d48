"""Unit tests for leadernet.sources.gdelt."""

from __future__ import annotations

import httpx

from leadernet.settings import Settings
from leadernet.sources.gdelt import GdeltNewsClient


def _client(handler) -> GdeltNewsClient:
    return GdeltNewsClient(settings=Settings(), transport=httpx.MockTransport(handler))


def test_fetch_articles_builds_artlist_query():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "articles": [
                    {
                        "title": "Putin meets Xi in Beijing",
                        "url": "https://example.com/putin-xi",
                        "domain": "example.com",
                        "seendate": "20240516T120000Z",
                    },
                    "not-a-record",
                ]
            },
        )

    articles = _client(handler).fetch_articles("Vladimir Putin", days_back=7, max_records=50)

    params = seen[0].url.params
    assert params["query"] == '"Vladimir Putin"'
    assert params["mode"] == "artlist"
    assert params["format"] == "json"
    assert params["timespan"] == str(7 * 1440)
    assert params["maxrecords"] == "50"
    assert len(articles) == 1
    article = articles[0]
    assert article.title == "Putin meets Xi in Beijing"
    assert article.source == "example.com"
    assert article.published == "20240516T120000Z"
    assert article.tone == 0.0


def test_nested_source_metadata_is_preferred():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "articles": [
                    {
                        "title": "Headline",
                        "tone": "-2.5",
                        "seenin": {"source": {"name": "Wire"}, "sourcepublishedatetime": "2024-05-01"},
                    }
                ]
            },
        )

    article = _client(handler).fetch_articles("Xi Jinping")[0]

    assert article.source == "Wire"
    assert article.published == "2024-05-01"
    assert article.tone == -2.5


def test_http_errors_yield_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    assert _client(handler).fetch_articles("Xi Jinping") == []


def test_transport_errors_yield_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    assert _client(handler).fetch_articles("Xi Jinping") == []


def test_non_json_body_yields_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>rate limited</html>")

    assert _client(handler).fetch_articles("Xi Jinping") == []


def test_missing_articles_key_yields_empty_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    assert _client(handler).fetch_articles("Xi Jinping") == []
