"""Factories do pipeline: criação de implementações concretas.

Centraliza a montagem do use case a partir das settings de ambiente.
Cada invocação recebe um use case novo; nada é compartilhado entre elas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.plugin_adapters import PostsEventNormalizer, PostsEventSource
from app.infra.host import HttpCalendarHost
from app.use_cases.import_events import ImportEventsUseCase
from config.settings import (
    get_host_settings,
    get_mapping_settings,
    get_source_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_host import CalendarHostProtocol


def create_calendar_host() -> CalendarHostProtocol:
    """Cria o adapter da capacidade `calendar_import` do host."""
    return HttpCalendarHost(get_host_settings())


def create_import_use_case(host: CalendarHostProtocol | None = None) -> ImportEventsUseCase:
    """Monta ImportEventsUseCase com fonte de posts e host configurados.

    Args:
        host: Adapter de host alternativo (ex: host embutido que expõe a
            capacidade como função). Padrão: HttpCalendarHost.
    """
    return ImportEventsUseCase(
        source=PostsEventSource(get_source_settings()),
        normalizer=PostsEventNormalizer(get_mapping_settings()),
        host=host or create_calendar_host(),
    )
