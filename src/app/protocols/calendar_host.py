"""Contrato da capacidade de importação de calendário do host.

Mantemos apenas o protocolo aqui para que o caso de uso não dependa de
como o host é alcançado (HTTP local, função importada, fake em memória).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CalendarHostProtocol(Protocol):
    """Capacidade request/response: ImportData serializado -> ImportResult serializado."""

    def calendar_import(self, payload: bytes) -> bytes:
        """Entrega o payload ao host e devolve a resposta bruta."""
        ...
