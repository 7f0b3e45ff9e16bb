"""Schemas pydantic usados pelos contratos."""

from cel_cash.contracts.schemas.auth import TokenBody, TokenResponse
from cel_cash.contracts.schemas.common import (
    EmptyBody,
    SubscriptionPathParams,
    TransactionPathParams,
    TypeId,
)
from cel_cash.contracts.schemas.transactions import (
    AddTransactionBody,
    CancelTransactionResponse,
    ListTransactionsParams,
    ListTransactionsResponse,
    RetryOrReverseTransactionResponse,
    ReverseTransactionBody,
    TransactionData,
    TransactionResponse,
    UpdateTransactionBody,
)

__all__ = [
    "AddTransactionBody",
    "CancelTransactionResponse",
    "EmptyBody",
    "ListTransactionsParams",
    "ListTransactionsResponse",
    "RetryOrReverseTransactionResponse",
    "ReverseTransactionBody",
    "SubscriptionPathParams",
    "TokenBody",
    "TokenResponse",
    "TransactionData",
    "TransactionPathParams",
    "TransactionResponse",
    "TypeId",
    "UpdateTransactionBody",
]
