"""Cliente HTTP síncrono para chamadas de saída do plugin.

Uma requisição por chamada, sem retry: falhas de transporte viram
`HttpError` e cabe ao adapter traduzi-las para a taxonomia do pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    # Transport alternativo (ex: httpx.MockTransport em testes)
    transport: httpx.BaseTransport | None = None


@dataclass(frozen=True)
class OutboundRequest:
    """Requisição de saída totalmente descrita por configuração."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class OutboundResponse:
    """Resposta bruta devolvida ao adapter."""

    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas (uma tentativa)."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    def send(self, request: OutboundRequest) -> OutboundResponse:
        """Executa a requisição e devolve o corpo completo.

        Raises:
            HttpError: falha de conexão, timeout, protocolo ou status não-2xx.
        """
        merged_headers = {**self._config.default_headers, **request.headers}
        try:
            with httpx.Client(
                timeout=self._config.timeout_seconds,
                transport=self._config.transport,
            ) as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=merged_headers,
                    content=request.body,
                )
        except httpx.TimeoutException as exc:
            logger.warning(
                "http_timeout",
                extra={"method": request.method, "url": request.url},
            )
            raise HttpError(f"timeout calling {request.url}") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={
                    "method": request.method,
                    "url": request.url,
                    "error_type": type(exc).__name__,
                },
            )
            raise HttpError(f"transport error calling {request.url}: {exc}") from exc

        if response.is_error:
            logger.warning(
                "http_error_status",
                extra={
                    "method": request.method,
                    "url": request.url,
                    "status_code": response.status_code,
                },
            )
            raise HttpError(
                f"unexpected status {response.status_code} from {request.url}",
                status_code=response.status_code,
            )

        return OutboundResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
