"""Implementações do cache de credenciais."""

from cel_cash.infra.cache.memory_cache import MemoryCredentialCache
from cel_cash.infra.cache.redis_cache import RedisCredentialCache

__all__ = ["MemoryCredentialCache", "RedisCredentialCache"]
