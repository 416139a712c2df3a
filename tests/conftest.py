"""Configuração do pytest para o plugin de importação de eventos."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import clear_settings_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings são cacheadas por processo; cada teste lê o ambiente de novo."""
    clear_settings_cache()
    yield
    clear_settings_cache()
