"""Settings da capacidade de importação exposta pelo host."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST_IMPORT_URL = "http://127.0.0.1:8765/calendar_import"


class HostSettings(BaseModel):
    """Endpoint local do host para `calendar_import`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    import_url: str = Field(
        default=DEFAULT_HOST_IMPORT_URL,
        description="URL da capacidade calendar_import do host.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout de transporte da chamada ao host (segundos).",
    )

    def validate_settings(self) -> list[str]:
        """Valida configurações do host."""
        errors: list[str] = []
        if not self.import_url.startswith(("http://", "https://")):
            errors.append(f"HOST_IMPORT_URL inválida: {self.import_url!r}")
        return errors


def _load_host_from_env() -> HostSettings:
    """Carrega HostSettings a partir de variáveis de ambiente."""
    return HostSettings(
        import_url=os.getenv("HOST_IMPORT_URL", DEFAULT_HOST_IMPORT_URL),
        timeout_seconds=float(os.getenv("HOST_IMPORT_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_host_settings() -> HostSettings:
    """Retorna instância cacheada de HostSettings."""
    return _load_host_from_env()


__all__ = ["HostSettings", "get_host_settings"]
