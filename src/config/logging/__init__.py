"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="planner_import_plugin")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("event_import_started", extra={"from": "2024-01-01"})

Campos obrigatórios em todo log:
- invocation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger, log_pipeline_failure
from config.logging.filters import InvocationIdFilter, RawContentRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "InvocationIdFilter",
    "RawContentRedactionFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_pipeline_failure",
]
