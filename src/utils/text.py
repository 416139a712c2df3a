"""Helpers puros de texto compartilhados pelos normalizers."""

from __future__ import annotations

TRUNCATION_MARKER = "..."


def truncate_text(value: str, limit: int) -> str:
    """Limita `value` a `limit` caracteres, anexando "..." quando corta.

    Strings que já cabem no limite voltam inalteradas. Com `limit == 3`
    o resultado de um corte é exatamente "...". Para `limit < 3` o marcador
    é encurtado para nunca exceder o limite (`limit <= 0` devolve "").

    Exemplo:
        >>> truncate_text("abcdefgh", 6)
        'abc...'
    """
    if len(value) <= limit:
        return value
    if limit < len(TRUNCATION_MARKER):
        return TRUNCATION_MARKER[: max(limit, 0)]
    return value[: limit - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER


__all__ = ["TRUNCATION_MARKER", "truncate_text"]
