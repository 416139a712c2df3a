"""Settings de identidade e permissões declaradas do plugin.

Alimentam o descritor retornado pelo export `meta`.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NETWORK_TARGETS = ("https://jsonplaceholder.typicode.com/*",)


class PluginMetaSettings(BaseModel):
    """Identidade, categoria e allow-list de rede do plugin."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    plugin_id: str = Field(default="example-planner-plugin", min_length=1)
    name: str = Field(default="Example Planner Plugin", min_length=1)
    app_id: str = Field(default="plusev_planner", min_length=1)
    category: str = Field(default="Import", min_length=1)
    description: str = Field(
        default="An example plugin that demonstrates how to import events into the PlusEV planner",
    )
    author: str = Field(default="Your Name")
    version: str = Field(default="1.0.0", pattern=r"^\d+\.\d+\.\d+$")
    repository: str = Field(default="https://github.com/your-username/your-plugin-repo")
    tags: tuple[str, ...] = Field(default=("example", "demo", "template"))
    contact_email: str = Field(default="your-email@example.com")
    allowed_network_targets: tuple[str, ...] = Field(
        default=DEFAULT_NETWORK_TARGETS,
        description="Padrões de URL que a fonte externa pode acessar.",
    )


def _parse_csv(raw_value: str | None) -> tuple[str, ...] | None:
    if raw_value is None:
        return None
    return tuple(item.strip() for item in raw_value.split(",") if item.strip())


def _load_plugin_meta_from_env() -> PluginMetaSettings:
    """Carrega PluginMetaSettings a partir de variáveis de ambiente."""
    values: dict[str, object] = {}
    for field_name, env_key in (
        ("plugin_id", "PLUGIN_ID"),
        ("name", "PLUGIN_NAME"),
        ("author", "PLUGIN_AUTHOR"),
        ("version", "PLUGIN_VERSION"),
        ("repository", "PLUGIN_REPOSITORY"),
        ("contact_email", "PLUGIN_CONTACT_EMAIL"),
    ):
        value = os.getenv(env_key)
        if value:
            values[field_name] = value
    targets = _parse_csv(os.getenv("PLUGIN_ALLOWED_NETWORK_TARGETS"))
    if targets:
        values["allowed_network_targets"] = targets
    return PluginMetaSettings.model_validate(values)


@lru_cache(maxsize=1)
def get_plugin_meta_settings() -> PluginMetaSettings:
    """Retorna instância cacheada de PluginMetaSettings."""
    return _load_plugin_meta_from_env()


__all__ = ["PluginMetaSettings", "get_plugin_meta_settings"]
