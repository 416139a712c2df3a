"""Protocolo de normalização de registros brutos em eventos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.import_job import ImportEvent, ImportJob


class EventNormalizerProtocol(Protocol):
    """Contrato mínimo para mapear registros da fonte em ImportEvent."""

    def normalize(self, records: Sequence[Any], job: ImportJob) -> list[ImportEvent]: ...
