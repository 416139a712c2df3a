"""Infra HTTP compartilhada pelos adapters de fonte e de host."""

from app.infra.http.client import (
    HttpClient,
    HttpClientConfig,
    HttpError,
    OutboundRequest,
    OutboundResponse,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "OutboundRequest",
    "OutboundResponse",
]
