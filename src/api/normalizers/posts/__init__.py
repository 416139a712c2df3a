"""Normalizer da fonte de posts de demonstração.

Extrai registros do corpo HTTP e os mapeia para eventos normalizados.
"""

from .extractor import extract_posts
from .normalizer import normalize_post, normalize_posts, select_records

__all__ = [
    "extract_posts",
    "normalize_post",
    "normalize_posts",
    "select_records",
]
