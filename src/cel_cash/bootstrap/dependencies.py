"""Composição do cliente a partir das settings.

Centraliza a escolha do backend de cache e a montagem de
transporte -> troca de token -> fetcher -> serviço.
"""

from __future__ import annotations

import logging

from cel_cash.auth import AuthenticatedFetcher, TokenAcquirer
from cel_cash.bootstrap.clients import create_async_redis_client, create_http_client
from cel_cash.client import CelCashService
from cel_cash.config.logging import configure_logging
from cel_cash.config.settings import (
    BaseSettings,
    CacheSettings,
    CelCashSettings,
    get_base_settings,
    get_cache_settings,
    get_cel_cash_settings,
)
from cel_cash.infra.cache import MemoryCredentialCache, RedisCredentialCache
from cel_cash.infra.http import HttpClientConfig, HttpTransport
from cel_cash.protocols.cache import CredentialCacheProtocol

logger = logging.getLogger(__name__)


def setup_logging(base_settings: BaseSettings | None = None) -> None:
    """Configura logging JSON com LOG_LEVEL e SERVICE_NAME do ambiente.

    Raises:
        ValueError: Se LOG_LEVEL for inválido.
    """
    base = base_settings or get_base_settings()
    configure_logging(level=base.log_level, service_name=base.service_name)


def create_credential_cache(
    cache_settings: CacheSettings | None = None,
    base_settings: BaseSettings | None = None,
) -> CredentialCacheProtocol:
    """Cria cache de credenciais baseado na configuração.

    - "memory": MemoryCredentialCache (um processo)
    - "redis": RedisCredentialCache (compartilhado entre instâncias)
    """
    cache_cfg = cache_settings or get_cache_settings()
    base = base_settings or get_base_settings()

    if cache_cfg.backend == "redis":
        cache: CredentialCacheProtocol = RedisCredentialCache(
            create_async_redis_client(base.redis_url)
        )
        logger.info("credential_cache_created", extra={"backend": "redis"})
        return cache

    if cache_cfg.backend == "memory":
        if base.is_production:
            logger.warning(
                "memory_cache_in_production",
                extra={"backend": "memory", "environment": base.environment},
            )
        logger.info("credential_cache_created", extra={"backend": "memory"})
        return MemoryCredentialCache()

    msg = f"CEL_CASH_CACHE_BACKEND inválido: {cache_cfg.backend}"
    raise ValueError(msg)


def create_cel_cash_service(
    settings: CelCashSettings | None = None,
    cache: CredentialCacheProtocol | None = None,
) -> CelCashService:
    """Monta CelCashService pronto para uso.

    Args:
        settings: CelCashSettings opcional. Se None, carrega do ambiente.
        cache: Cache opcional. Se None, usa create_credential_cache().

    Raises:
        ValueError: Se as settings forem inválidas.
    """
    cel_cash = settings or get_cel_cash_settings()
    errors = cel_cash.validate()
    if errors:
        raise ValueError(f"Configuração Cel Cash inválida: {'; '.join(errors)}")

    transport = HttpTransport(
        HttpClientConfig(timeout_seconds=cel_cash.request_timeout_seconds),
        client=create_http_client(cel_cash),
    )
    acquirer = TokenAcquirer(
        transport,
        base_url=cel_cash.base_url,
        client_id=cel_cash.client_id,
        client_secret=cel_cash.client_secret,
    )
    fetcher = AuthenticatedFetcher(
        transport,
        cache if cache is not None else create_credential_cache(),
        acquirer,
        base_url=cel_cash.base_url,
    )
    return CelCashService(fetcher)
