"""Exports do plugin invocados pelo host: `import_events` e `meta`.

Contrato com o host:
- `import_events` lê um ImportJob do canal de entrada e devolve 0 (sucesso)
  ou 1 (qualquer falha). Detalhes do erro só saem pelos logs e por
  `set_error`; o status code é o único resultado observável.
- `meta` escreve o descritor do plugin no canal de saída e devolve 0.

Nenhuma exceção atravessa a fronteira com o host.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.plugin.meta import build_plugin_meta
from app.bootstrap import create_import_use_case
from app.domain.errors import ImportPipelineError, InputDecodeError
from app.domain.import_job import ImportJob
from app.infra.host import StdioInvocation
from app.observability import invocation_scope, record_import_result
from config.logging import log_pipeline_failure
from config.settings import get_plugin_meta_settings

if TYPE_CHECKING:
    from app.protocols.invocation_io import InvocationIOProtocol
    from app.use_cases.import_events import ImportEventsUseCase

logger = logging.getLogger(__name__)

STATUS_SUCCESS = 0
STATUS_FAILURE = 1


def import_events(
    io: InvocationIOProtocol | None = None,
    *,
    use_case: ImportEventsUseCase | None = None,
    invocation_id: str | None = None,
) -> int:
    """Executa uma invocação completa de importação.

    Args:
        io: Canal da invocação. Padrão: stdin/stdout.
        use_case: Use case pré-montado (testes ou host embutido).
            Padrão: montado a partir das settings de ambiente.
        invocation_id: Id atribuído pelo host. Padrão: gerado por invocação.

    Returns:
        0 em sucesso, 1 em qualquer falha.
    """
    io = io or StdioInvocation()
    with invocation_scope(invocation_id):
        return _run_import(io, use_case)


def meta(io: InvocationIOProtocol | None = None) -> int:
    """Publica o descritor estático do plugin no canal de saída."""
    io = io or StdioInvocation()
    io.write_output(build_plugin_meta(get_plugin_meta_settings()).to_payload())
    return STATUS_SUCCESS


def decode_job(io: InvocationIOProtocol) -> ImportJob:
    """Intake: decodifica o ImportJob do canal de entrada.

    Raises:
        InputDecodeError: payload ausente ou malformado.
    """
    try:
        raw_job = io.read_input()
    except OSError as exc:
        raise InputDecodeError(f"failed to read input: {exc}") from exc
    try:
        return ImportJob.model_validate_json(raw_job)
    except ValidationError as exc:
        raise InputDecodeError(f"failed to parse input JSON: {exc.errors()[0]['msg']}") from exc


def _run_import(io: InvocationIOProtocol, use_case: ImportEventsUseCase | None) -> int:
    try:
        job = decode_job(io)
    except InputDecodeError as exc:
        logger.error("import_job_decode_failed", extra={"error": str(exc)})
        io.set_error(str(exc))
        record_import_result(STATUS_FAILURE)
        return STATUS_FAILURE

    job_context = job.log_context()
    logger.info("event_import_started", extra=job_context)
    if job.is_inverted:
        # Janela invertida é tolerada: eventos ancoram em `from` mesmo assim.
        logger.warning("import_job_range_inverted", extra=job_context)

    try:
        outcome = (use_case or create_import_use_case()).execute(job)
    except ImportPipelineError as exc:
        log_pipeline_failure(logger, exc.stage, exc, **job_context)
        message = f"failed to fetch events: {exc}" if exc.stage == "fetch" else str(exc)
        io.set_error(message)
        record_import_result(STATUS_FAILURE)
        return STATUS_FAILURE
    except Exception as exc:
        logger.exception(
            "event_import_unexpected_error",
            extra={"error_type": type(exc).__name__, **job_context},
        )
        io.set_error(f"unexpected error: {exc}")
        record_import_result(STATUS_FAILURE)
        return STATUS_FAILURE

    logger.info("events_imported", extra={"count": outcome.imported_count, **job_context})
    record_import_result(STATUS_SUCCESS, outcome.imported_count)
    return STATUS_SUCCESS


__all__ = ["STATUS_FAILURE", "STATUS_SUCCESS", "decode_job", "import_events", "meta"]
