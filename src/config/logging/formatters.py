"""Formatter JSON dos logs do plugin.

Cada linha em stderr é um objeto JSON com os campos de REQUIRED_LOG_FIELDS
(renomeados por FIELD_RENAME_MAP) mais o `extra` do chamador. O host lê
essas linhas junto com a linha `{"error": ...}` da invocação, então nenhum
payload bruto da fonte externa deve ir para os logs.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {"asctime", "levelname", "name", "message", "invocation_id", "service"}
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

# ISO 8601 com offset, comparável com as datas do ImportJob
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON do plugin.

    Títulos de eventos podem ter acentos; o JSON sai em UTF-8 sem escapes.

    Exemplo de output:
        {"asctime": "2026-02-02T10:30:00+0000", "invocation_id": "9f1c...",
         "level": "INFO", "logger": "api.plugin.exports",
         "message": "events_imported", "service": "planner_import_plugin",
         "count": 5}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS)),
        datefmt=LOG_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
