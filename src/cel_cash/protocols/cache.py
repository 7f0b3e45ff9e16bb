"""Protocolo do cache de credenciais.

Interface leve (ABC) dependida pelo fetcher autenticado.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# Raiz do namespace e chave única do access_token (uma identidade por processo)
CACHE_ROOT = "cel_cash"
ACCESS_TOKEN_KEY = f"{CACHE_ROOT}:access_token"


class CredentialCacheProtocol(ABC):
    """Contrato mínimo assíncrono para cache chave-valor com TTL.

    Métodos canônicos:
    - get(key) -> str | None
      Retorna o valor, ou None se ausente ou expirado.
    - set(key, value, ttl_seconds) -> None
      Sobrescreve entrada existente e reinicia a expiração.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Retorna valor da chave.

        Args:
            key: Chave do cache

        Returns:
            Valor armazenado ou None (ausente/expirado).
        """

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Grava valor com TTL.

        Args:
            key: Chave do cache
            value: Valor opaco (access_token)
            ttl_seconds: Tempo de vida em segundos
        """
