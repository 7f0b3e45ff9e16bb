"""Contratos declarativos da API Cel Cash.

`CONTRACTS` é o registro de recursos disponíveis, indexado pelo nome.
"""

from types import MappingProxyType

from cel_cash.contracts.auth import auth
from cel_cash.contracts.router import (
    HTTP_METHODS,
    OperationDescriptor,
    ResourceContract,
    operation,
    router,
)
from cel_cash.contracts.transactions import transactions

CONTRACTS = MappingProxyType({"transactions": transactions})

__all__ = [
    "CONTRACTS",
    "HTTP_METHODS",
    "OperationDescriptor",
    "ResourceContract",
    "auth",
    "operation",
    "router",
    "transactions",
]
