"""Modelos de domínio do pipeline de importação de eventos.

Esses contratos espelham o JSON trocado com o host (camelCase no fio,
snake_case no Python) e ficam no domínio para não acoplar o mapeamento
aos detalhes de transporte.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _assume_utc(value: datetime) -> datetime:
    """Timestamps sem timezone são interpretados como UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class ImportJob(BaseModel):
    """Pedido de importação enviado pelo host (intervalo de datas).

    `from_date <= to_date` é esperado mas não validado aqui.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    from_date: UtcDatetime = Field(..., alias="from", description="Início da janela.")
    to_date: UtcDatetime = Field(..., alias="to", description="Fim da janela.")

    @property
    def is_inverted(self) -> bool:
        """True quando o host mandou `from` depois de `to`."""
        return self.from_date > self.to_date

    def log_context(self) -> dict[str, str]:
        """Campos do job para logs (datas no formato YYYY-MM-DD)."""
        return {
            "from": self.from_date.strftime("%Y-%m-%d"),
            "to": self.to_date.strftime("%Y-%m-%d"),
        }


class ImportEvent(BaseModel):
    """Evento normalizado aceito pela importação de calendário do host."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str = Field(..., description="Título final do evento.")
    start_date: UtcDatetime = Field(..., alias="startDate")
    end_date: UtcDatetime = Field(..., alias="endDate")
    timezone: str = Field(default="UTC", description="Timezone IANA do evento.")
    notes: str = Field(default="", description="Notas livres anexadas ao evento.")
    tags: tuple[str, ...] = Field(default=(), description="Tags de categorização.")


class ImportData(BaseModel):
    """Envelope de transmissão construído uma vez por importação."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    events: tuple[ImportEvent, ...] = Field(default=())

    def to_payload(self) -> bytes:
        """Serializa o envelope no formato JSON esperado pelo host."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


class ImportResult(BaseModel):
    """Veredito do host sobre a importação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    success: bool
    error: str = ""


class ImportOutcome(BaseModel):
    """Resultado interno de uma execução bem-sucedida do pipeline."""

    model_config = ConfigDict(frozen=True)

    imported_count: int = Field(..., ge=0)


__all__ = ["ImportData", "ImportEvent", "ImportJob", "ImportOutcome", "ImportResult"]
