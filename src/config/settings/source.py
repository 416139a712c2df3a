"""Settings da fonte externa de eventos.

URL, método e headers da requisição de leitura ficam aqui como
configuração injetada, nunca como constantes espalhadas no adapter.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SOURCE_URL = "https://jsonplaceholder.typicode.com/posts"
DEFAULT_SOURCE_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": "PlusEV-Plugin/1.0",
}


class SourceSettings(BaseModel):
    """Configuração da requisição única feita à fonte externa."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    url: str = Field(
        default=DEFAULT_SOURCE_URL,
        description="URL da fonte externa de registros.",
    )
    method: str = Field(
        default="GET",
        description="Método HTTP da requisição de leitura.",
    )
    headers: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SOURCE_HEADERS),
        description="Headers fixos enviados à fonte.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout de transporte da requisição (segundos).",
    )

    def validate_settings(self) -> list[str]:
        """Valida configurações mínimas da fonte.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.url.startswith(("http://", "https://")):
            errors.append(f"EVENT_SOURCE_URL inválida: {self.url!r}")
        if self.method.upper() not in {"GET", "POST"}:
            errors.append(f"EVENT_SOURCE_METHOD não suportado: {self.method}")
        return errors


def _parse_extra_headers(raw_value: str | None) -> dict[str, str]:
    """Lê headers adicionais em JSON (objeto string->string)."""
    if not raw_value or not raw_value.strip():
        return {}
    parsed = json.loads(raw_value)
    if not isinstance(parsed, dict):
        raise ValueError("EVENT_SOURCE_HEADERS deve ser um objeto JSON")
    return {str(key): str(value) for key, value in parsed.items()}


def _load_source_from_env() -> SourceSettings:
    """Carrega SourceSettings a partir de variáveis de ambiente."""
    headers = dict(DEFAULT_SOURCE_HEADERS)
    headers.update(_parse_extra_headers(os.getenv("EVENT_SOURCE_HEADERS")))
    return SourceSettings(
        url=os.getenv("EVENT_SOURCE_URL", DEFAULT_SOURCE_URL),
        method=os.getenv("EVENT_SOURCE_METHOD", "GET").upper(),
        headers=headers,
        timeout_seconds=float(os.getenv("EVENT_SOURCE_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_source_settings() -> SourceSettings:
    """Retorna instância cacheada de SourceSettings."""
    return _load_source_from_env()


__all__ = ["SourceSettings", "get_source_settings"]
