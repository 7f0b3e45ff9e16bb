"""Cliente assíncrono e tipado para a API de pagamentos Cel Cash.

Uso:
    from cel_cash import create_cel_cash_service

    async with create_cel_cash_service() as cel_cash:
        response = await cel_cash.transactions.cancel(
            params={"transactionId": 123, "typeId": "galaxPayId"},
        )
        if response.validated and response.body.type:
            ...
"""

from cel_cash.bootstrap import (
    create_cel_cash_service,
    create_credential_cache,
    setup_logging,
)
from cel_cash.client import CelCashService, ResourceClient, build_client
from cel_cash.contracts import CONTRACTS
from cel_cash.contracts.request import ApiResponse
from cel_cash.errors import (
    AuthenticationError,
    CacheUnavailableError,
    CelCashError,
    ContractDefinitionError,
    RequestTimeoutError,
    ResponseValidationError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)

__all__ = [
    "CONTRACTS",
    "ApiResponse",
    "AuthenticationError",
    "CacheUnavailableError",
    "CelCashError",
    "CelCashService",
    "ContractDefinitionError",
    "RequestTimeoutError",
    "ResourceClient",
    "ResponseValidationError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
    "build_client",
    "create_cel_cash_service",
    "create_credential_cache",
    "setup_logging",
]
