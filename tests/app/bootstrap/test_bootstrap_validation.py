"""Testes de validação de settings no startup."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import (
    collect_settings_errors,
    create_import_use_case,
    initialize_test_plugin,
    validate_runtime_settings,
)
from app.infra.host import HttpCalendarHost
from app.use_cases.import_events import ImportEventsUseCase
from tests.fakes.fake_calendar_host import FakeCalendarHost


@pytest.fixture(autouse=True)
def _default_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "EVENT_SOURCE_URL",
        "HOST_IMPORT_URL",
        "PLUGIN_ALLOWED_NETWORK_TARGETS",
    ):
        monkeypatch.delenv(key, raising=False)


def test_default_settings_are_valid() -> None:
    assert collect_settings_errors() == []


def test_source_outside_allow_list_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_SOURCE_URL", "https://evil.test/posts")

    errors = collect_settings_errors()

    assert errors == ["meta: EVENT_SOURCE_URL fora da allow-list de rede: https://evil.test/posts"]


def test_validation_only_warns_in_development(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("HOST_IMPORT_URL", "nope")
    caplog.set_level(logging.WARNING, logger="app.bootstrap")

    validate_runtime_settings()

    assert any(record.message == "settings_validation_failed" for record in caplog.records)


def test_validation_fails_fast_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("HOST_IMPORT_URL", "nope")

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        validate_runtime_settings()


def test_create_import_use_case_uses_http_host_by_default() -> None:
    use_case = create_import_use_case()

    assert isinstance(use_case, ImportEventsUseCase)
    assert isinstance(use_case._host, HttpCalendarHost)


def test_create_import_use_case_accepts_host_override() -> None:
    host = FakeCalendarHost()
    assert create_import_use_case(host=host)._host is host


def test_initialize_test_plugin_sets_debug_level() -> None:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        initialize_test_plugin()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = handlers
        root.setLevel(level)
