"""Protocolos (interfaces) dos colaboradores externos."""

from cel_cash.protocols.cache import (
    ACCESS_TOKEN_KEY,
    CACHE_ROOT,
    CredentialCacheProtocol,
)
from cel_cash.protocols.transport import TransportProtocol, TransportResponse

__all__ = [
    "ACCESS_TOKEN_KEY",
    "CACHE_ROOT",
    "CredentialCacheProtocol",
    "TransportProtocol",
    "TransportResponse",
]
