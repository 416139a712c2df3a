"""Observabilidade: logs estruturados e métricas.

Re-exporta funções de invocation_id e métricas para uso em todo o plugin.

Uso:
    from app.observability import get_invocation_id, invocation_scope
    from app.observability import record_import_result, record_latency
"""

from app.observability.invocation import (
    get_invocation_id,
    invocation_scope,
    reset_invocation_id,
    set_invocation_id,
)
from app.observability.metrics import (
    record_import_result,
    record_latency,
)

__all__ = [
    "get_invocation_id",
    "invocation_scope",
    "record_import_result",
    "record_latency",
    "reset_invocation_id",
    "set_invocation_id",
]
