"""Contrato de fonte externa de registros brutos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.import_job import ImportJob

RecordT_co = TypeVar("RecordT_co", covariant=True)


@runtime_checkable
class EventSourceProtocol(Protocol[RecordT_co]):
    """Faz uma única leitura na fonte restrita à janela do job.

    Raises:
        FetchError: falha de transporte.
        ResponseDecodeError: corpo fora do schema esperado.
    """

    def fetch_records(self, job: ImportJob) -> Sequence[RecordT_co]: ...
