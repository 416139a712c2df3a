"""Descritor estático do plugin exposto pelo export `meta`.

O host lê este descritor para identificar o plugin, exibi-lo no catálogo
e aplicar as permissões declaradas (allow-list de rede, acesso a fs e
stdout/stderr). A fonte externa só pode ser alcançada se a URL dela
estiver coberta por `allowedNetworkTargets`.
"""

from __future__ import annotations

from fnmatch import fnmatchcase

from pydantic import BaseModel, ConfigDict, Field

from config.settings.plugin_meta import PluginMetaSettings


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AuthorContact(_WireModel):
    """Contato do autor (ex: kind="email")."""

    kind: str
    value: str


class NetworkTargetRule(_WireModel):
    """Padrão de URL permitido (wildcard `*`)."""

    pattern: str


class ResourceAccess(_WireModel):
    """Permissões de recurso requisitadas ao host."""

    allowed_network_targets: tuple[NetworkTargetRule, ...] = Field(
        default=(), alias="allowedNetworkTargets"
    )
    fs_write_access: tuple[str, ...] | None = Field(default=None, alias="fsWriteAccess")
    stdout_access: bool = Field(default=True, alias="stdoutAccess")
    stderr_access: bool = Field(default=True, alias="stderrAccess")


class PluginMeta(_WireModel):
    """Descritor completo do plugin."""

    plugin_id: str = Field(..., alias="pluginId")
    name: str
    app_id: str = Field(..., alias="appId")
    category: str
    description: str = ""
    author: str = ""
    version: str
    repository: str = ""
    tags: tuple[str, ...] = ()
    contacts: tuple[AuthorContact, ...] = ()
    resources: ResourceAccess = Field(default_factory=ResourceAccess)

    def to_payload(self) -> bytes:
        """Serializa o descritor no JSON camelCase esperado pelo host."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


def build_plugin_meta(settings: PluginMetaSettings | None = None) -> PluginMeta:
    """Monta o descritor a partir das settings de identidade."""
    settings = settings or PluginMetaSettings()
    contacts = (
        (AuthorContact(kind="email", value=settings.contact_email),)
        if settings.contact_email
        else ()
    )
    return PluginMeta(
        plugin_id=settings.plugin_id,
        name=settings.name,
        app_id=settings.app_id,
        category=settings.category,
        description=settings.description,
        author=settings.author,
        version=settings.version,
        repository=settings.repository,
        tags=settings.tags,
        contacts=contacts,
        resources=ResourceAccess(
            allowed_network_targets=tuple(
                NetworkTargetRule(pattern=pattern)
                for pattern in settings.allowed_network_targets
            ),
            fs_write_access=None,
            stdout_access=True,
            stderr_access=True,
        ),
    )


def is_network_target_allowed(meta: PluginMeta, url: str) -> bool:
    """True se `url` casa com algum padrão da allow-list declarada."""
    return any(
        fnmatchcase(url, rule.pattern)
        for rule in meta.resources.allowed_network_targets
    )


__all__ = [
    "AuthorContact",
    "NetworkTargetRule",
    "PluginMeta",
    "ResourceAccess",
    "build_plugin_meta",
    "is_network_target_allowed",
]
