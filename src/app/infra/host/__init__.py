"""Adapters de borda com o host (invocação e capacidade de importação)."""

from app.infra.host.http_calendar_host import HttpCalendarHost
from app.infra.host.invocation_channels import BytesInvocation, StdioInvocation

__all__ = [
    "BytesInvocation",
    "HttpCalendarHost",
    "StdioInvocation",
]
