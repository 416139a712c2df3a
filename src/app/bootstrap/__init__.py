"""Bootstrap do plugin: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import create_import_use_case, initialize_plugin

    initialize_plugin()
    use_case = create_import_use_case()
"""

from __future__ import annotations

import logging

from api.plugin.meta import build_plugin_meta, is_network_target_allowed
from app.bootstrap.dependencies import create_calendar_host, create_import_use_case
from app.observability import get_invocation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_host_settings,
    get_plugin_meta_settings,
    get_source_settings,
)

logger = logging.getLogger(__name__)


def initialize_plugin() -> None:
    """Inicializa o plugin (logging estruturado JSON com invocation_id).

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        invocation_id_getter=get_invocation_id,
    )


def initialize_test_plugin() -> None:
    """Inicializa o plugin para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        invocation_id_getter=get_invocation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de todas as settings, incluindo a allow-list de rede.

    Uma URL de fonte fora de `allowedNetworkTargets` é violação de contrato
    de deploy: o host bloquearia a requisição em toda invocação.
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())

    source = get_source_settings()
    errors.extend(f"source: {error}" for error in source.validate_settings())
    errors.extend(f"host: {error}" for error in get_host_settings().validate_settings())

    meta = build_plugin_meta(get_plugin_meta_settings())
    if not is_network_target_allowed(meta, source.url):
        errors.append(f"meta: EVENT_SOURCE_URL fora da allow-list de rede: {source.url}")
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "collect_settings_errors",
    "create_calendar_host",
    "create_import_use_case",
    "initialize_plugin",
    "initialize_test_plugin",
    "validate_runtime_settings",
]
