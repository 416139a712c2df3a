"""Extrator de respostas da API de posts (JSONPlaceholder).

Estrutura esperada do corpo: array JSON de objetos
`{id, title, body, userId}`. Campos extras são ignorados.

Não faz mapeamento para eventos - apenas extração estrutural.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from app.domain.errors import ResponseDecodeError
from app.domain.source_records import SourcePost

logger = logging.getLogger(__name__)

_POSTS_ADAPTER: TypeAdapter[list[SourcePost]] = TypeAdapter(list[SourcePost])


def extract_posts(body: bytes) -> list[SourcePost]:
    """Decodifica o corpo da resposta em registros `SourcePost`.

    Raises:
        ResponseDecodeError: corpo não é um array de posts válido.
    """
    try:
        posts = _POSTS_ADAPTER.validate_json(body)
    except ValidationError as exc:
        logger.warning(
            "posts_response_invalid",
            extra={"error_count": exc.error_count(), "body_size": len(body)},
        )
        raise ResponseDecodeError(f"failed to decode response: {exc.errors()[0]['msg']}") from exc

    logger.debug("posts_extracted", extra={"record_count": len(posts)})
    return posts
