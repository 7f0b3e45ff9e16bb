"""Contrato do recurso de transações."""

from __future__ import annotations

from cel_cash.contracts.router import operation, router
from cel_cash.contracts.schemas import (
    AddTransactionBody,
    CancelTransactionResponse,
    EmptyBody,
    ListTransactionsParams,
    ListTransactionsResponse,
    RetryOrReverseTransactionResponse,
    ReverseTransactionBody,
    SubscriptionPathParams,
    TransactionPathParams,
    TransactionResponse,
    UpdateTransactionBody,
)

transactions = router(
    "transactions",
    {
        "list": operation(
            "GET",
            "/",
            query=ListTransactionsParams,
            responses={200: ListTransactionsResponse},
            summary="Lista transações",
        ),
        "create": operation(
            "POST",
            "/:subscriptionId/:typeId/add",
            path_params=SubscriptionPathParams,
            body=AddTransactionBody,
            responses={200: TransactionResponse},
            summary="Adiciona transação a uma assinatura",
        ),
        "update": operation(
            "PUT",
            "/:subscriptionId/:typeId",
            path_params=SubscriptionPathParams,
            body=UpdateTransactionBody,
            responses={200: TransactionResponse},
            summary="Atualiza transação",
        ),
        "retry": operation(
            "PUT",
            "/:transactionId/:typeId/retry",
            path_params=TransactionPathParams,
            body=EmptyBody,
            responses={200: RetryOrReverseTransactionResponse},
            summary="Reenvia cobrança recusada",
        ),
        "reverse": operation(
            "PUT",
            "/:transactionId/:typeId/reverse",
            path_params=TransactionPathParams,
            body=ReverseTransactionBody,
            responses={200: RetryOrReverseTransactionResponse},
            summary="Estorna transação (total ou parcial)",
        ),
        "capture": operation(
            "PUT",
            "/:transactionId/:typeId/capture",
            path_params=TransactionPathParams,
            body=EmptyBody,
            responses={200: TransactionResponse},
            summary="Captura transação pré-autorizada",
        ),
        "cancel": operation(
            "DELETE",
            "/:transactionId/:typeId",
            path_params=TransactionPathParams,
            body=EmptyBody,
            responses={200: CancelTransactionResponse},
            summary="Cancela transação",
        ),
    },
    path_prefix="/transactions",
)
