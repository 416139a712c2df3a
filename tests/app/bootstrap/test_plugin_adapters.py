"""Testes dos adapters concretos da fonte de posts."""

from __future__ import annotations

from datetime import UTC, datetime

import httpx
import pytest

from app.bootstrap.plugin_adapters import PostsEventSource
from app.domain.errors import FetchError, ResponseDecodeError
from app.domain.import_job import ImportJob
from app.infra.http import HttpClient, HttpClientConfig
from config.settings import SourceSettings

JOB = ImportJob(
    from_date=datetime(2024, 1, 1, tzinfo=UTC),
    to_date=datetime(2024, 1, 10, tzinfo=UTC),
)


def _source(handler, settings: SourceSettings | None = None) -> PostsEventSource:
    client = HttpClient(HttpClientConfig(transport=httpx.MockTransport(handler)))
    return PostsEventSource(settings or SourceSettings(), client=client)


def test_fetch_sends_configured_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1, "title": "A", "body": "a", "userId": 1}])

    posts = _source(handler).fetch_records(JOB)

    assert [post.id for post in posts] == [1]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://jsonplaceholder.typicode.com/posts"
    assert seen[0].headers["Accept"] == "application/json"
    assert seen[0].headers["User-Agent"] == "PlusEV-Plugin/1.0"


def test_transport_error_becomes_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(FetchError, match="failed to send HTTP request"):
        _source(handler).fetch_records(JOB)


def test_malformed_body_becomes_response_decode_error() -> None:
    with pytest.raises(ResponseDecodeError):
        _source(lambda request: httpx.Response(200, content=b"<html>")).fetch_records(JOB)


def test_custom_url_from_settings() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, content=b"[]")

    settings = SourceSettings(url="https://other.test/items")
    assert _source(handler, settings).fetch_records(JOB) == []
    assert seen == ["https://other.test/items"]
