"""Testes da montagem de contratos (router/operation)."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from cel_cash.contracts import CONTRACTS, auth, operation, router, transactions
from cel_cash.contracts.schemas import EmptyBody, TransactionPathParams
from cel_cash.errors import ContractDefinitionError


class _IdParams(BaseModel):
    id: str


class TestTransactionsContract:
    """Contrato de transações declarado no pacote."""

    def test_registry_exposes_transactions(self) -> None:
        assert CONTRACTS["transactions"] is transactions
        assert "auth" not in CONTRACTS

    def test_declares_all_operations(self) -> None:
        assert set(transactions) == {
            "list",
            "create",
            "update",
            "retry",
            "reverse",
            "capture",
            "cancel",
        }

    @pytest.mark.parametrize(
        ("name", "method", "path"),
        [
            ("list", "GET", "/transactions"),
            ("create", "POST", "/transactions/:subscriptionId/:typeId/add"),
            ("update", "PUT", "/transactions/:subscriptionId/:typeId"),
            ("retry", "PUT", "/transactions/:transactionId/:typeId/retry"),
            ("reverse", "PUT", "/transactions/:transactionId/:typeId/reverse"),
            ("capture", "PUT", "/transactions/:transactionId/:typeId/capture"),
            ("cancel", "DELETE", "/transactions/:transactionId/:typeId"),
        ],
    )
    def test_method_and_path(self, name: str, method: str, path: str) -> None:
        descriptor = transactions[name]
        assert descriptor.name == name
        assert descriptor.method == method
        assert descriptor.path == path

    def test_list_has_query_and_no_body(self) -> None:
        descriptor = transactions["list"]
        assert descriptor.query is not None
        assert descriptor.body is None
        assert descriptor.path_params is None

    def test_operations_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            transactions.operations["list"] = transactions["cancel"]  # type: ignore[index]

    def test_auth_token_operation(self) -> None:
        token = auth["token"]
        assert token.method == "POST"
        assert token.path == "/token"
        assert 200 in token.responses


class TestRouterInvariants:
    """Checagens feitas na inicialização."""

    def test_placeholder_without_schema_raises(self) -> None:
        with pytest.raises(ContractDefinitionError, match="placeholders"):
            router("x", {"get": operation("GET", "/:id", responses={})})

    def test_schema_field_without_placeholder_raises(self) -> None:
        with pytest.raises(ContractDefinitionError, match="path params"):
            router(
                "x",
                {"get": operation("GET", "/items", path_params=_IdParams, responses={})},
            )

    def test_mismatched_names_raise(self) -> None:
        with pytest.raises(ContractDefinitionError):
            router(
                "x",
                {
                    "get": operation(
                        "GET",
                        "/:transactionId/:kind",
                        path_params=TransactionPathParams,
                        responses={},
                    )
                },
            )

    def test_repeated_placeholder_raises(self) -> None:
        with pytest.raises(ContractDefinitionError, match="repetido"):
            router(
                "x",
                {"get": operation("GET", "/:id/:id", path_params=_IdParams, responses={})},
            )

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(ContractDefinitionError, match="método HTTP"):
            router("x", {"get": operation("FETCH", "/", responses={})})

    def test_prefix_join(self) -> None:
        contract = router(
            "items",
            {
                "list": operation("GET", "/", responses={}),
                "get": operation("get", "/:id", path_params=_IdParams, responses={}),
                "clear": operation("DELETE", "clear", body=EmptyBody, responses={}),
            },
            path_prefix="/items/",
        )
        assert contract["list"].path == "/items"
        assert contract["get"].path == "/items/:id"
        assert contract["get"].method == "GET"
        assert contract["clear"].path == "/items/clear"


class TestRenderPath:
    """Substituição de placeholders."""

    def test_reverse_path(self) -> None:
        path = transactions["reverse"].render_path({"transactionId": "123", "typeId": "myId"})
        assert path == "/transactions/123/myId/reverse"

    def test_numeric_value_is_stringified(self) -> None:
        path = transactions["cancel"].render_path({"transactionId": 77, "typeId": "galaxPayId"})
        assert path == "/transactions/77/galaxPayId"

    def test_value_is_percent_encoded(self) -> None:
        path = transactions["cancel"].render_path({"transactionId": "a/b c", "typeId": "myId"})
        assert path == "/transactions/a%2Fb%20c/myId"

    def test_placeholders_in_order(self) -> None:
        assert transactions["create"].placeholders == ("subscriptionId", "typeId")
