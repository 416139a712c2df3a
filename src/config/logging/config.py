"""Configuração centralizada de logging.

Logging estruturado JSON com:
- Campos obrigatórios (invocation_id, service, level, logger, message)
- Saída em stderr (stdout fica reservado para o canal de output do plugin)
- Nível configurável por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do plugin (app/bootstrap/)
    configure_logging(level="INFO", service_name="planner_import_plugin")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("events_imported", extra={"count": 5})
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import InvocationIdFilter, RawContentRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "planner_import_plugin"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    invocation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o plugin.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do plugin para identificação nos logs.
        invocation_id_getter: Função opcional que retorna o invocation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(InvocationIdFilter(service_name, invocation_id_getter))
    handler.addFilter(RawContentRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e invocation_id.
    """
    return logging.getLogger(name)


def log_pipeline_failure(
    logger: logging.Logger,
    stage: str,
    error: BaseException,
    **context: object,
) -> None:
    """Log padronizado de falha terminal de um estágio do pipeline.

    Args:
        logger: Logger instance.
        stage: Estágio que falhou (ex: "intake", "fetch", "deliver").
        error: Exceção que encerrou a invocação.
        **context: Campos adicionais (ex: from/to do job).

    Exemplo:
        log_pipeline_failure(logger, "fetch", exc, **{"from": "2024-01-01"})
    """
    extra: dict[str, object] = {
        "stage": stage,
        "error": str(error),
        "error_type": type(error).__name__,
    }
    extra.update(context)

    logger.error("event_import_failed", extra=extra)
