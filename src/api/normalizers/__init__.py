"""Normalizers por fonte: conversão de registros externos para eventos.

Estrutura:
- posts/: fonte de demonstração (JSONPlaceholder `/posts`)

Cada fonte tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .posts import extract_posts, normalize_posts

__all__ = [
    "extract_posts",
    "normalize_posts",
]
