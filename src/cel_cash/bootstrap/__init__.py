"""Bootstrap: criação das implementações concretas a partir das settings."""

from cel_cash.bootstrap.dependencies import (
    create_cel_cash_service,
    create_credential_cache,
    setup_logging,
)

__all__ = ["create_cel_cash_service", "create_credential_cache", "setup_logging"]
