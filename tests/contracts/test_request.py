"""Testes de montagem de requisição e ApiResponse."""

from __future__ import annotations

import pytest

from cel_cash.contracts import auth, transactions
from cel_cash.contracts.request import ApiResponse, build_request
from cel_cash.contracts.schemas import (
    ListTransactionsParams,
    ReverseTransactionBody,
    TokenBody,
    TransactionPathParams,
)
from cel_cash.errors import UnexpectedStatusError

BASE_URL = "https://api.sandbox.cel.cash/v2/"


class TestBuildRequest:
    """build_request com valores já validados."""

    def test_reverse_request(self) -> None:
        ctx = build_request(
            transactions["reverse"],
            BASE_URL,
            path_params=TransactionPathParams(transactionId="123", typeId="myId"),
            body=ReverseTransactionBody(valueToReverse=5),
            headers={"Authorization": "Bearer abc"},
        )
        assert ctx.method == "PUT"
        assert ctx.path == "/transactions/123/myId/reverse"
        assert ctx.url == "https://api.sandbox.cel.cash/v2/transactions/123/myId/reverse"
        assert ctx.json == {"valueToReverse": 5.0}
        assert ctx.params is None
        assert ctx.headers["Authorization"] == "Bearer abc"
        assert ctx.headers["Content-Type"] == "application/json"

    def test_list_request_has_query_and_no_body(self) -> None:
        ctx = build_request(
            transactions["list"],
            BASE_URL,
            query=ListTransactionsParams(startAt=0, limit=10, status=["captured", "denied"]),
        )
        assert ctx.url == "https://api.sandbox.cel.cash/v2/transactions"
        assert ctx.params == {"startAt": 0, "limit": 10, "status": "captured,denied"}
        assert ctx.json is None
        assert "Content-Type" not in ctx.headers

    def test_declared_body_defaults_to_empty_object(self) -> None:
        ctx = build_request(
            transactions["retry"],
            BASE_URL,
            path_params=TransactionPathParams(transactionId="9", typeId="galaxPayId"),
        )
        assert ctx.json == {}

    def test_token_request(self) -> None:
        ctx = build_request(auth["token"], BASE_URL, body=TokenBody(scope=["cards.read"]))
        assert ctx.url == "https://api.sandbox.cel.cash/v2/token"
        assert ctx.json == {"grant_type": "authorization_code", "scope": ["cards.read"]}


class TestApiResponse:
    """Resultado discriminado."""

    def test_expect_declared_returns_body(self) -> None:
        response = ApiResponse(status=200, body={"type": True})
        assert response.expect_declared() == {"type": True}
        assert response.ok is True

    def test_expect_declared_raises_on_passthrough(self) -> None:
        response = ApiResponse(status=418, body="teapot", validated=False)
        with pytest.raises(UnexpectedStatusError) as exc_info:
            response.expect_declared()
        assert exc_info.value.status_code == 418
        assert exc_info.value.body == "teapot"
        assert response.ok is False
