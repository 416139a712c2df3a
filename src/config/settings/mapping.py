"""Settings do mapeamento registro -> evento normalizado.

Rótulos, limites e tags são fixos por deploy; nenhum deles é inferido
do conteúdo dos registros.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

# Teto rígido de eventos por importação
MAX_EVENTS_PER_IMPORT = 5


class MappingSettings(BaseModel):
    """Parâmetros fixos aplicados a cada evento mapeado."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    max_events: int = Field(
        default=MAX_EVENTS_PER_IMPORT,
        ge=1,
        le=MAX_EVENTS_PER_IMPORT,
        description="Quantidade máxima de registros mapeados por importação.",
    )
    title_label: str = Field(
        default="Demo Event: ",
        description="Prefixo concatenado ao título de cada registro.",
    )
    title_max_len: int = Field(
        default=50,
        ge=3,
        description="Limite de caracteres do título final.",
    )
    notes_body_max_len: int = Field(
        default=100,
        ge=3,
        description="Limite de caracteres do trecho de conteúdo nas notas.",
    )
    event_duration_minutes: int = Field(
        default=60,
        ge=1,
        description="Duração fixa de cada evento em minutos.",
    )
    timezone: str = Field(
        default="UTC",
        min_length=1,
        description="Timezone fixa atribuída aos eventos.",
    )
    tags: tuple[str, ...] = Field(
        default=("demo", "example"),
        description="Tags constantes de categorização.",
    )


def _parse_tags(raw_value: str | None) -> tuple[str, ...] | None:
    """Converte lista separada por vírgula em tupla de tags."""
    if raw_value is None:
        return None
    return tuple(tag.strip() for tag in raw_value.split(",") if tag.strip())


def _load_mapping_from_env() -> MappingSettings:
    """Carrega MappingSettings a partir de variáveis de ambiente."""
    values: dict[str, object] = {
        "max_events": int(os.getenv("IMPORT_MAX_EVENTS", str(MAX_EVENTS_PER_IMPORT))),
        "title_label": os.getenv("IMPORT_TITLE_LABEL", "Demo Event: "),
        "event_duration_minutes": int(os.getenv("IMPORT_EVENT_DURATION_MINUTES", "60")),
    }
    tags = _parse_tags(os.getenv("IMPORT_EVENT_TAGS"))
    if tags is not None:
        values["tags"] = tags
    return MappingSettings.model_validate(values)


@lru_cache(maxsize=1)
def get_mapping_settings() -> MappingSettings:
    """Retorna instância cacheada de MappingSettings."""
    return _load_mapping_from_env()


__all__ = ["MAX_EVENTS_PER_IMPORT", "MappingSettings", "get_mapping_settings"]
