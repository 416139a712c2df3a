"""Taxonomia de erros do pipeline de importação.

Todo erro aqui é terminal para a invocação: nenhum é reprocessado.
O único resultado observável pelo host é o status code; o texto do
erro só aparece nos logs e no canal de erro do host.
"""

from __future__ import annotations


class ImportPipelineError(Exception):
    """Base para falhas terminais do pipeline."""

    stage = "pipeline"


class InputDecodeError(ImportPipelineError):
    """Payload do job enviado pelo host está malformado."""

    stage = "intake"


class FetchError(ImportPipelineError):
    """Falha de transporte ao chamar a fonte externa."""

    stage = "fetch"


class ResponseDecodeError(ImportPipelineError):
    """Resposta da fonte externa não corresponde ao schema esperado."""

    stage = "fetch"


class ProtocolError(ImportPipelineError):
    """Resultado retornado pelo host não pôde ser decodificado."""

    stage = "deliver"


class HostCallError(ProtocolError):
    """Falha de transporte na chamada à capacidade de importação do host."""


class CalendarImportError(ImportPipelineError):
    """Host reportou explicitamente falha na importação."""

    stage = "deliver"

    def __init__(self, host_error: str) -> None:
        super().__init__(f"calendar import failed: {host_error}")
        self.host_error = host_error


__all__ = [
    "CalendarImportError",
    "FetchError",
    "HostCallError",
    "ImportPipelineError",
    "InputDecodeError",
    "ProtocolError",
    "ResponseDecodeError",
]
