"""Protocolos HTTP usados pelo app.

Evita dependência direta dos adapters no cliente concreto (httpx).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.infra.http import OutboundRequest, OutboundResponse


class HttpSenderProtocol(Protocol):
    """Contrato mínimo para envio de uma requisição sem retry."""

    def send(self, request: OutboundRequest) -> OutboundResponse: ...
