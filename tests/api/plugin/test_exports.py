"""Testes dos exports invocados pelo host (import_events e meta)."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from api.plugin.exports import STATUS_FAILURE, STATUS_SUCCESS, import_events, meta
from app.bootstrap.plugin_adapters import PostsEventNormalizer, PostsEventSource
from app.infra.host import BytesInvocation
from app.infra.http import HttpClient, HttpClientConfig
from app.observability import get_invocation_id
from app.use_cases.import_events import ImportEventsUseCase
from config.settings import MappingSettings, SourceSettings
from tests.fakes.fake_calendar_host import FakeCalendarHost
from tests.fakes.fake_event_source import FakeEventSource, build_posts

JOB_JSON = '{"from": "2024-01-01T00:00:00Z", "to": "2024-01-10T00:00:00Z"}'


def _http_use_case(handler, host: FakeCalendarHost) -> ImportEventsUseCase:
    client = HttpClient(HttpClientConfig(transport=httpx.MockTransport(handler)))
    return ImportEventsUseCase(
        source=PostsEventSource(SourceSettings(), client=client),
        normalizer=PostsEventNormalizer(MappingSettings()),
        host=host,
    )


def _fake_use_case(source: FakeEventSource, host: FakeCalendarHost) -> ImportEventsUseCase:
    return ImportEventsUseCase(
        source=source,
        normalizer=PostsEventNormalizer(MappingSettings()),
        host=host,
    )


def _failure_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.message == "event_import_failed"]


class TestImportEvents:
    def test_success_returns_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        host = FakeCalendarHost()
        posts = [{"id": i, "title": f"T{i}", "body": "b", "userId": 1} for i in range(1, 4)]
        use_case = _http_use_case(lambda request: httpx.Response(200, json=posts), host)
        channel = BytesInvocation(JOB_JSON)

        status = import_events(channel, use_case=use_case)

        assert status == STATUS_SUCCESS
        assert channel.error is None
        assert host.call_count == 1
        assert len(host.last_import().events) == 3
        imported = [record for record in caplog.records if record.message == "events_imported"]
        assert imported[0].count == 3

    def test_started_log_has_calendar_dates(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        use_case = _fake_use_case(FakeEventSource(build_posts(1)), FakeCalendarHost())

        import_events(BytesInvocation(JOB_JSON), use_case=use_case)

        started = next(record for record in caplog.records if record.message == "event_import_started")
        assert getattr(started, "from") == "2024-01-01"
        assert started.to == "2024-01-10"

    def test_null_title_record_is_imported_with_label_only(self) -> None:
        host = FakeCalendarHost()
        body = b'[{"id": 1, "title": null, "body": null, "userId": 1}, {"title": "B"}]'
        use_case = _http_use_case(lambda request: httpx.Response(200, content=body), host)

        assert import_events(BytesInvocation(JOB_JSON), use_case=use_case) == STATUS_SUCCESS
        events = host.last_import().events
        assert [event.title for event in events] == ["Demo Event: ", "Demo Event: B"]
        assert events[1].notes.startswith("Demo event created from post ID 0.")

    def test_empty_source_returns_zero(self) -> None:
        host = FakeCalendarHost()
        use_case = _http_use_case(lambda request: httpx.Response(200, content=b"[]"), host)

        assert import_events(BytesInvocation(JOB_JSON), use_case=use_case) == STATUS_SUCCESS
        assert host.last_import().events == ()

    def test_transport_error_returns_one_without_host_call(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        host = FakeCalendarHost()

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        channel = BytesInvocation(JOB_JSON)
        status = import_events(channel, use_case=_http_use_case(handler, host))

        assert status == STATUS_FAILURE
        assert host.call_count == 0
        assert channel.error is not None
        assert channel.error.startswith("failed to fetch events: failed to send HTTP request")
        failure = _failure_records(caplog)[0]
        assert failure.stage == "fetch"
        assert failure.error_type == "FetchError"

    def test_malformed_source_body_returns_one(self) -> None:
        host = FakeCalendarHost()
        use_case = _http_use_case(lambda request: httpx.Response(200, content=b"{}"), host)
        channel = BytesInvocation(JOB_JSON)

        assert import_events(channel, use_case=use_case) == STATUS_FAILURE
        assert host.call_count == 0
        assert channel.error.startswith("failed to fetch events: failed to decode response")

    def test_host_rejection_returns_one_and_logs_error(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        host = FakeCalendarHost(success=False, error="quota exceeded")
        use_case = _fake_use_case(FakeEventSource(build_posts(2)), host)
        channel = BytesInvocation(JOB_JSON)

        status = import_events(channel, use_case=use_case)

        assert status == STATUS_FAILURE
        assert channel.error == "calendar import failed: quota exceeded"
        failure = _failure_records(caplog)[0]
        assert "quota exceeded" in failure.error
        assert failure.stage == "deliver"
        assert failure.levelno == logging.ERROR

    def test_undecodable_host_result_returns_one(self) -> None:
        host = FakeCalendarHost(raw_response=b"oops")
        use_case = _fake_use_case(FakeEventSource(build_posts(1)), host)

        assert import_events(BytesInvocation(JOB_JSON), use_case=use_case) == STATUS_FAILURE

    @pytest.mark.parametrize("raw_job", ["", "not json", '{"from": "2024-01-01T00:00:00Z"}'])
    def test_malformed_job_returns_one_without_calls(
        self, raw_job: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        host = FakeCalendarHost()
        source = FakeEventSource(build_posts(1))
        channel = BytesInvocation(raw_job)

        status = import_events(channel, use_case=_fake_use_case(source, host))

        assert status == STATUS_FAILURE
        assert source.jobs == []
        assert host.call_count == 0
        assert channel.error.startswith("failed to parse input JSON")
        assert any(record.message == "import_job_decode_failed" for record in caplog.records)

    def test_inverted_range_is_tolerated_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        raw_job = '{"from": "2024-02-01T00:00:00Z", "to": "2024-01-01T00:00:00Z"}'
        use_case = _fake_use_case(FakeEventSource(build_posts(1)), FakeCalendarHost())

        assert import_events(BytesInvocation(raw_job), use_case=use_case) == STATUS_SUCCESS
        assert any(record.message == "import_job_range_inverted" for record in caplog.records)

    def test_unexpected_error_returns_one(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        host = FakeCalendarHost(raise_error=KeyError("boom"))
        use_case = _fake_use_case(FakeEventSource(build_posts(1)), host)
        channel = BytesInvocation(JOB_JSON)

        assert import_events(channel, use_case=use_case) == STATUS_FAILURE
        assert channel.error.startswith("unexpected error")
        unexpected = [r for r in caplog.records if r.message == "event_import_unexpected_error"]
        assert unexpected[0].exc_info is not None

    def test_each_invocation_gets_an_id_and_restores_context(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        use_case = _fake_use_case(FakeEventSource([]), FakeCalendarHost())

        import_events(BytesInvocation(JOB_JSON), use_case=use_case)
        import_events(BytesInvocation(JOB_JSON), use_case=use_case)

        ids = [
            record.invocation_id
            for record in caplog.records
            if record.message == "metric_import_result"
        ]
        assert len(ids) == 2
        assert ids[0] and ids[1] and ids[0] != ids[1]
        assert get_invocation_id() == ""

    def test_host_provided_invocation_id_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        use_case = _fake_use_case(FakeEventSource([]), FakeCalendarHost())

        import_events(BytesInvocation(JOB_JSON), use_case=use_case, invocation_id="host-42")

        result = next(r for r in caplog.records if r.message == "metric_import_result")
        assert result.invocation_id == "host-42"
        assert get_invocation_id() == ""


class TestMeta:
    def test_writes_descriptor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PLUGIN_ALLOWED_NETWORK_TARGETS", raising=False)
        channel = BytesInvocation()

        assert meta(channel) == STATUS_SUCCESS

        descriptor = json.loads(channel.output)
        assert descriptor["pluginId"] == "example-planner-plugin"
        assert descriptor["appId"] == "plusev_planner"
        assert descriptor["category"] == "Import"
        assert descriptor["resources"]["allowedNetworkTargets"] == [
            {"pattern": "https://jsonplaceholder.typicode.com/*"}
        ]
