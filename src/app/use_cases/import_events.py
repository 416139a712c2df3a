"""Use case de importação de eventos para o calendário do host.

Pipeline linear: Fetch -> Map -> Deliver. Qualquer falha sobe como
`ImportPipelineError` e encerra a invocação; não há compensação nem
commit parcial (a chamada ao host é atômica do ponto de vista do plugin).
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.errors import CalendarImportError, ProtocolError
from app.domain.import_job import ImportData, ImportOutcome, ImportResult
from app.observability import record_latency

if TYPE_CHECKING:
    from app.domain.import_job import ImportEvent, ImportJob
    from app.protocols.calendar_host import CalendarHostProtocol
    from app.protocols.event_source import EventSourceProtocol
    from app.protocols.normalizer import EventNormalizerProtocol

logger = logging.getLogger(__name__)


class ImportEventsUseCase:
    """Orquestra leitura da fonte, mapeamento e entrega ao host."""

    def __init__(
        self,
        source: EventSourceProtocol[Any],
        normalizer: EventNormalizerProtocol,
        host: CalendarHostProtocol,
    ) -> None:
        self._source = source
        self._normalizer = normalizer
        self._host = host

    def execute(self, job: ImportJob) -> ImportOutcome:
        """Executa o pipeline completo para um job.

        Raises:
            FetchError, ResponseDecodeError: falha na leitura da fonte.
            ProtocolError: resposta do host ilegível (ou host inalcançável).
            CalendarImportError: host recusou a importação.
        """
        events = self.collect_events(job)
        self.deliver(events)
        return ImportOutcome(imported_count=len(events))

    def collect_events(self, job: ImportJob) -> list[ImportEvent]:
        """Fetch + Map: registros da fonte viram eventos normalizados."""
        started = time.perf_counter()
        records = self._source.fetch_records(job)
        record_latency("event_source", "fetch", (time.perf_counter() - started) * 1000)

        events = self._normalizer.normalize(records, job)
        logger.debug(
            "events_mapped",
            extra={"record_count": len(records), "event_count": len(events)},
        )
        return events

    def deliver(self, events: list[ImportEvent]) -> ImportResult:
        """Deliver: uma única chamada à capacidade de importação do host."""
        payload = ImportData(events=events).to_payload()

        started = time.perf_counter()
        raw_result = self._host.calendar_import(payload)
        record_latency("calendar_host", "calendar_import", (time.perf_counter() - started) * 1000)

        result = _decode_import_result(raw_result)
        if not result.success:
            raise CalendarImportError(result.error)
        return result


def _decode_import_result(raw_result: bytes) -> ImportResult:
    try:
        return ImportResult.model_validate_json(raw_result)
    except ValidationError as exc:
        raise ProtocolError(f"failed to decode import result: {exc.errors()[0]['msg']}") from exc


__all__ = ["ImportEventsUseCase"]
