"""Invocation id de cada execução do plugin.

Um processo do plugin pode atender várias invocações do host em sequência
(host embutido chamando `import_events` repetidamente). Cada uma recebe um
id próprio, visível em todos os logs dela e descartado ao final.

Uso:
    from app.observability import invocation_scope

    with invocation_scope() as invocation_id:
        ...  # executar o pipeline
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_invocation_id: ContextVar[str] = ContextVar("invocation_id", default="")


def get_invocation_id() -> str:
    """Id da invocação corrente; vazio fora de uma invocação."""
    return _invocation_id.get()


def set_invocation_id(invocation_id: str | None = None) -> Token[str]:
    value = invocation_id or uuid.uuid4().hex
    return _invocation_id.set(value)


def reset_invocation_id(token: Token[str]) -> None:
    _invocation_id.reset(token)


@contextmanager
def invocation_scope(invocation_id: str | None = None) -> Iterator[str]:
    """Delimita uma invocação: define o id na entrada e restaura na saída.

    Args:
        invocation_id: Id fornecido pelo host. Se None, gera um novo.
    """
    token = set_invocation_id(invocation_id)
    try:
        yield _invocation_id.get()
    finally:
        reset_invocation_id(token)
