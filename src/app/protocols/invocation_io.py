"""Contrato do canal de entrada/saída de uma invocação do plugin."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InvocationIOProtocol(Protocol):
    """Canal entregue pelo host a cada invocação.

    - `read_input` devolve o payload bruto da invocação (ex: ImportJob JSON)
    - `write_output` publica a saída do export (ex: descritor do `meta`)
    - `set_error` reporta ao host a mensagem de erro da invocação
    """

    def read_input(self) -> bytes: ...

    def write_output(self, data: bytes) -> None: ...

    def set_error(self, message: str) -> None: ...
