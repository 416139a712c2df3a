"""Registro de métricas via structured logging.

As métricas saem como logs estruturados e podem ser agregadas pelo host
ou por qualquer coletor que leia o stderr do plugin.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Resultado da importação: contagem de eventos e status final

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("posts_source", "fetch", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

from app.observability.invocation import get_invocation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "posts_source", "calendar_host")
        operation: Nome da operação (ex: "fetch", "calendar_import")
        latency_ms: Latência em milissegundos
    """
    logger.debug(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "invocation_id": get_invocation_id(),
        },
    )


def record_import_result(status_code: int, event_count: int | None = None) -> None:
    """Registra o desfecho de uma invocação de importação.

    Args:
        status_code: Status devolvido ao host (0 sucesso, 1 falha)
        event_count: Eventos entregues ao host, quando houve entrega
    """
    extra: dict[str, object] = {
        "metric_type": "import_result",
        "component": "import_events",
        "status_code": status_code,
        "invocation_id": get_invocation_id(),
    }
    if event_count is not None:
        extra["event_count"] = event_count

    logger.info("metric_import_result", extra=extra)
