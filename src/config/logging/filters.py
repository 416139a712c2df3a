"""Filters de logging do plugin.

- InvocationIdFilter: marca cada record com a invocação corrente e o plugin
- RawContentRedactionFilter: impede que conteúdo bruto da fonte ou do host
  chegue ao stderr, que o host coleta junto com o canal de erro
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Campos de `extra` que podem carregar conteúdo bruto de terceiros
RAW_CONTENT_FIELDS = frozenset({"body", "payload", "raw_response", "notes"})


class InvocationIdFilter(logging.Filter):
    """Injeta invocation_id e service em cada record.

    Um invocation_id passado via `extra` tem precedência sobre o getter.
    Fora de uma invocação (ex: `meta`, `check-config`) o id fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        invocation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_invocation_id = invocation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "invocation_id", None):
            record.invocation_id = self._get_invocation_id()
        record.service = self._service_name
        return True


class RawContentRedactionFilter(logging.Filter):
    """Troca conteúdo bruto em RAW_CONTENT_FIELDS pelo tamanho dele.

    Só o tamanho sobrevive (`"<redacted:123>"`), suficiente para
    diagnosticar respostas vazias ou truncadas.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in RAW_CONTENT_FIELDS:
            value = record.__dict__.get(field_name)
            if isinstance(value, (str, bytes)):
                record.__dict__[field_name] = f"<redacted:{len(value)}>"
        return True
