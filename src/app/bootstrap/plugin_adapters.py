"""Adapters concretos da fonte de posts (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.posts import extract_posts, normalize_posts
from app.domain.errors import FetchError
from app.domain.source_records import SourcePost
from app.infra.http import HttpClient, HttpClientConfig, HttpError, OutboundRequest
from app.protocols.event_source import EventSourceProtocol
from app.protocols.normalizer import EventNormalizerProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.import_job import ImportEvent, ImportJob
    from app.protocols.http_client import HttpSenderProtocol
    from config.settings import MappingSettings, SourceSettings

logger = logging.getLogger(__name__)


class PostsEventSource(EventSourceProtocol[SourcePost]):
    """Fonte de posts via uma única requisição HTTP configurada."""

    def __init__(
        self, settings: SourceSettings, *, client: HttpSenderProtocol | None = None
    ) -> None:
        self._settings = settings
        self._client = client or HttpClient(
            HttpClientConfig(timeout_seconds=settings.timeout_seconds)
        )

    def fetch_records(self, job: ImportJob) -> list[SourcePost]:
        request = OutboundRequest(
            method=self._settings.method,
            url=self._settings.url,
            headers=dict(self._settings.headers),
        )
        logger.debug(
            "posts_fetch_started",
            extra={"url": request.url, "method": request.method, **job.log_context()},
        )
        try:
            response = self._client.send(request)
        except HttpError as exc:
            raise FetchError(f"failed to send HTTP request: {exc}") from exc
        return extract_posts(response.body)


class PostsEventNormalizer(EventNormalizerProtocol):
    """Normalizador de posts com settings de mapeamento fixas."""

    def __init__(self, settings: MappingSettings) -> None:
        self._settings = settings

    def normalize(self, records: Sequence[SourcePost], job: ImportJob) -> list[ImportEvent]:
        return normalize_posts(records, job, self._settings)
