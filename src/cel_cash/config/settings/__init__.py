"""Agregador de settings do cliente Cel Cash."""

from __future__ import annotations

from cel_cash.config.settings.cache import (
    CacheBackend,
    CacheSettings,
    get_cache_settings,
)
from cel_cash.config.settings.cel_cash import (
    CEL_CASH_PRODUCTION_URL,
    CEL_CASH_SANDBOX_URL,
    CelCashSettings,
    get_cel_cash_settings,
)
from cel_cash.config.settings.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "CEL_CASH_PRODUCTION_URL",
    "CEL_CASH_SANDBOX_URL",
    "BaseSettings",
    "CacheBackend",
    "CacheSettings",
    "CelCashSettings",
    "Environment",
    "get_base_settings",
    "get_cache_settings",
    "get_cel_cash_settings",
]
