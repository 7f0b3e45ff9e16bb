"""Pipeline de autenticação: troca de credenciais e fetcher com cache."""

from cel_cash.auth.fetcher import AuthenticatedFetcher
from cel_cash.auth.token import (
    DEFAULT_SCOPES,
    Credential,
    TokenAcquirer,
    basic_authorization,
)

__all__ = [
    "DEFAULT_SCOPES",
    "AuthenticatedFetcher",
    "Credential",
    "TokenAcquirer",
    "basic_authorization",
]
