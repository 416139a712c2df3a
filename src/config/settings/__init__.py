"""Agregador de settings do plugin de importação.

Re-exporta todas as settings e funções de cada módulo.
Organização por responsabilidade para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Host settings
from config.settings.host import (
    HostSettings,
    get_host_settings,
)

# Mapping settings
from config.settings.mapping import (
    MAX_EVENTS_PER_IMPORT,
    MappingSettings,
    get_mapping_settings,
)

# Plugin metadata settings
from config.settings.plugin_meta import (
    PluginMetaSettings,
    get_plugin_meta_settings,
)

# Source settings
from config.settings.source import (
    SourceSettings,
    get_source_settings,
)


def clear_settings_cache() -> None:
    """Limpa o cache de todas as settings (uso em testes)."""
    get_base_settings.cache_clear()
    get_host_settings.cache_clear()
    get_mapping_settings.cache_clear()
    get_plugin_meta_settings.cache_clear()
    get_source_settings.cache_clear()


__all__ = [
    "MAX_EVENTS_PER_IMPORT",
    # Base
    "BaseSettings",
    "Environment",
    # Host
    "HostSettings",
    # Mapping
    "MappingSettings",
    # Meta
    "PluginMetaSettings",
    # Source
    "SourceSettings",
    "clear_settings_cache",
    "get_base_settings",
    "get_host_settings",
    "get_mapping_settings",
    "get_plugin_meta_settings",
    "get_source_settings",
]
