"""Fábrica de clientes por recurso.

`build_client(contract, fetcher)` devolve um objeto com um método
assíncrono por operação declarada. Cada método valida params, query e
corpo antes de chegar ao fetcher (e portanto antes de qualquer chamada
de rede, inclusive a troca de token).

Uso:
    client = build_client(transactions, fetcher)
    response = await client.reverse(
        params={"transactionId": 123, "typeId": "myId"},
        body={"valueToReverse": 10.5},
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cel_cash.contracts.validation import validate
from cel_cash.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel

    from cel_cash.auth.fetcher import AuthenticatedFetcher
    from cel_cash.contracts.request import ApiResponse
    from cel_cash.contracts.router import OperationDescriptor, ResourceContract


@dataclass(frozen=True)
class OperationClient:
    """Método de uma operação, ligado ao fetcher."""

    operation: OperationDescriptor
    fetcher: AuthenticatedFetcher

    async def __call__(
        self,
        *,
        params: Mapping[str, Any] | BaseModel | None = None,
        query: Mapping[str, Any] | BaseModel | None = None,
        body: Mapping[str, Any] | BaseModel | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> ApiResponse:
        """Valida entradas e executa a operação.

        Raises:
            ValidationError: Entrada fora do schema (nenhuma chamada é feita)
        """
        op = self.operation
        return await self.fetcher.call(
            op,
            path_params=_validate_part(op, op.path_params, params, "params"),
            query=_validate_part(op, op.query, query, "query"),
            body=_validate_part(op, op.body, body, "body"),
            headers=headers,
            timeout=timeout,
        )


def _validate_part(
    op: OperationDescriptor,
    schema: type[BaseModel] | None,
    value: Any,
    location: str,
) -> BaseModel | None:
    if schema is None:
        if value:
            raise ValidationError(
                f"{op.name} não aceita {location}",
                location=location,
            )
        return None
    return validate(schema, value, location=location)


@dataclass(frozen=True)
class ResourceClient:
    """Cliente de um recurso; um atributo chamável por operação."""

    contract: ResourceContract
    fetcher: AuthenticatedFetcher

    @property
    def operations(self) -> tuple[str, ...]:
        return tuple(self.contract.operations)

    def __getattr__(self, name: str) -> OperationClient:
        # Só é chamado para atributos inexistentes; evita recursão em dataclass
        if name.startswith("_") or name in ("contract", "fetcher"):
            raise AttributeError(name)
        try:
            operation = self.contract.operations[name]
        except KeyError:
            raise AttributeError(
                f"{self.contract.name} não possui operação {name!r}"
            ) from None
        return OperationClient(operation=operation, fetcher=self.fetcher)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self.contract.operations})


def build_client(contract: ResourceContract, fetcher: AuthenticatedFetcher) -> ResourceClient:
    """Cria cliente sem estado para o recurso."""
    return ResourceClient(contract=contract, fetcher=fetcher)
