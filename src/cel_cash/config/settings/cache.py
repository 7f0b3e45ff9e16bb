"""Settings do cache de credenciais."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from cel_cash.config.settings.core import BaseSettings

CacheBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class CacheSettings:
    """Configurações do cache de access_token.

    Attributes:
        backend: memory (um processo) ou redis (compartilhado)
    """

    backend: CacheBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de cache.

        Args:
            base: BaseSettings para verificar ambiente e REDIS_URL.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"CEL_CASH_CACHE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and base.is_production:
            errors.append(
                "CEL_CASH_CACHE_BACKEND=memory não recomendado em production "
                "com múltiplas instâncias. Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("CEL_CASH_CACHE_BACKEND=redis requer REDIS_URL configurado")

        return errors


def _load_cache_from_env() -> CacheSettings:
    backend_str = os.getenv("CEL_CASH_CACHE_BACKEND", "memory").lower()
    backend: CacheBackend = "redis" if backend_str == "redis" else "memory"
    return CacheSettings(backend=backend)


@lru_cache(maxsize=1)
def get_cache_settings() -> CacheSettings:
    """Retorna instância cacheada de CacheSettings."""
    return _load_cache_from_env()
