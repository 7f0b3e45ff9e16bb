"""Cache de credenciais em memória, apenas para desenvolvimento e testes.

ATENÇÃO: não compartilha o token entre processos. Em produção com mais de
uma instância, use RedisCredentialCache.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from cel_cash.protocols.cache import CredentialCacheProtocol

if TYPE_CHECKING:
    from collections.abc import Callable


class MemoryCredentialCache(CredentialCacheProtocol):
    """Cache chave-valor com TTL e relógio injetável.

    Args:
        clock: Função que retorna o instante atual em segundos
            (padrão: time.monotonic). Testes passam um relógio simulado.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._store: dict[str, tuple[str, float]] = {}  # key -> (value, expires_at)

    async def get(self, key: str) -> str | None:
        """Retorna valor se ainda válido; entrada expirada é removida."""
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Grava valor; TTL <= 0 não armazena (nasceria expirado)."""
        if ttl_seconds <= 0:
            self._store.pop(key, None)
            return
        self._store[key] = (value, self._clock() + ttl_seconds)
