"""Capacidade `calendar_import` do host alcançada via HTTP local."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.errors import HostCallError
from app.infra.http import HttpClient, HttpClientConfig, HttpError, OutboundRequest
from app.protocols.calendar_host import CalendarHostProtocol

if TYPE_CHECKING:
    from app.protocols.http_client import HttpSenderProtocol
    from config.settings import HostSettings

logger = logging.getLogger(__name__)

_COMPONENT = "http_calendar_host"


class HttpCalendarHost(CalendarHostProtocol):
    """Implementação do protocolo de host postando ImportData em JSON."""

    __slots__ = ("_client", "_import_url")

    def __init__(
        self, settings: HostSettings, *, client: HttpSenderProtocol | None = None
    ) -> None:
        self._import_url = settings.import_url
        self._client = client or HttpClient(
            HttpClientConfig(timeout_seconds=settings.timeout_seconds)
        )

    def calendar_import(self, payload: bytes) -> bytes:
        request = OutboundRequest(
            method="POST",
            url=self._import_url,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            body=payload,
        )
        try:
            response = self._client.send(request)
        except HttpError as exc:
            logger.error(
                "calendar_host_call_failed",
                extra={
                    "component": _COMPONENT,
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                },
            )
            raise HostCallError(f"failed to call calendar_import: {exc}") from exc
        return response.body
