"""Cache de credenciais em Redis (Upstash compatível).

Compartilha o access_token entre instâncias do serviço. A expiração fica
a cargo do próprio Redis (SETEX).

Contrato de Keys:
    Keys são fixas (ver protocols.cache). O valor é o access_token e nunca
    deve aparecer em logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cel_cash.errors import CacheUnavailableError
from cel_cash.protocols.cache import CredentialCacheProtocol

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)


class RedisCredentialCache(CredentialCacheProtocol):
    """Cache de credenciais usando Redis assíncrono.

    Args:
        async_redis_client: Cliente redis.asyncio
    """

    def __init__(self, async_redis_client: AsyncRedis[bytes]) -> None:
        self._async_redis = async_redis_client

    async def get(self, key: str) -> str | None:
        try:
            data = await self._async_redis.get(key)
        except Exception as exc:
            raise CacheUnavailableError("Falha ao ler credencial no Redis") from exc
        if data is None:
            return None
        return data.decode() if isinstance(data, bytes) else str(data)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            if ttl_seconds <= 0:
                # Entrada nasceria expirada: equivale a remover
                await self._async_redis.delete(key)
                return
            await self._async_redis.setex(key, ttl_seconds, value)
        except Exception as exc:
            raise CacheUnavailableError("Falha ao gravar credencial no Redis") from exc
        logger.debug("credential_cached", extra={"key": key, "ttl": ttl_seconds})
