"""Normalizer de posts: converte registros da fonte em ImportEvent.

Regras de mapeamento (por posição `i` no prefixo selecionado):
- startDate = from + i dias; endDate = startDate + duração fixa
- timezone fixa, tags constantes
- título = rótulo + título do post, truncado
- notas = id do post + trecho do corpo truncado
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from app.domain.import_job import ImportEvent
from config.settings.mapping import MappingSettings
from utils.text import truncate_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.import_job import ImportJob
    from app.domain.source_records import SourcePost

NOTES_TEMPLATE = "Demo event created from post ID {post_id}. Content: {excerpt}"


def select_records(records: Sequence[SourcePost], max_events: int) -> list[SourcePost]:
    """Prefixo fixo de até `max_events` registros, na ordem da fonte."""
    return list(records[:max_events])


def normalize_post(
    post: SourcePost,
    position: int,
    job: ImportJob,
    settings: MappingSettings,
) -> ImportEvent:
    """Mapeia um post para evento; a data depende só da posição."""
    start = job.from_date + timedelta(days=position)
    excerpt = truncate_text(post.body, settings.notes_body_max_len)
    return ImportEvent(
        title=truncate_text(f"{settings.title_label}{post.title}", settings.title_max_len),
        start_date=start,
        end_date=start + timedelta(minutes=settings.event_duration_minutes),
        timezone=settings.timezone,
        notes=NOTES_TEMPLATE.format(post_id=post.id, excerpt=excerpt),
        tags=settings.tags,
    )


def normalize_posts(
    records: Sequence[SourcePost],
    job: ImportJob,
    settings: MappingSettings | None = None,
) -> list[ImportEvent]:
    """Normaliza o prefixo selecionado de posts para eventos de calendário.

    Lista vazia não é erro: devolve zero eventos.
    """
    settings = settings or MappingSettings()
    selected = select_records(records, settings.max_events)
    return [
        normalize_post(post, position, job, settings)
        for position, post in enumerate(selected)
    ]
