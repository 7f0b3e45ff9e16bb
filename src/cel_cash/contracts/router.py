"""Contratos declarativos: operação lógica -> formato HTTP.

Cada recurso da API é um `ResourceContract` montado por `router()`, que
aplica o prefixo de path e verifica, na inicialização, que os placeholders
do path batem com os campos do schema de path params.

Uso:
    transactions = router(
        "transactions",
        {"cancel": operation("DELETE", "/:transactionId/:typeId", ...)},
        path_prefix="/transactions",
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from cel_cash.errors import ContractDefinitionError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class OperationDescriptor:
    """Operação declarada de um recurso.

    Attributes:
        name: Nome da operação (ex: reverse)
        method: Verbo HTTP
        path: Template completo com placeholders `:nome`
        path_params: Schema dos params de path (None se não houver)
        query: Schema da query string (None se não houver)
        body: Schema do corpo (None se a operação não envia corpo)
        responses: Schema de resposta por status code
        summary: Descrição curta
    """

    name: str
    method: str
    path: str
    path_params: type[BaseModel] | None = None
    query: type[BaseModel] | None = None
    body: type[BaseModel] | None = None
    responses: Mapping[int, type[BaseModel]] = field(default_factory=dict)
    summary: str = ""

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER_RE.findall(self.path))

    def render_path(self, params: Mapping[str, Any]) -> str:
        """Substitui placeholders pelos valores (sempre como string)."""

        def _sub(match: re.Match[str]) -> str:
            return quote(str(params[match.group(1)]), safe="")

        return _PLACEHOLDER_RE.sub(_sub, self.path)


@dataclass(frozen=True)
class ResourceContract:
    """Conjunto de operações de um recurso, com prefixo comum."""

    name: str
    path_prefix: str
    operations: Mapping[str, OperationDescriptor]

    def __getitem__(self, operation_name: str) -> OperationDescriptor:
        return self.operations[operation_name]

    def __contains__(self, operation_name: object) -> bool:
        return operation_name in self.operations

    def __iter__(self):
        return iter(self.operations)


def operation(
    method: str,
    path: str,
    *,
    responses: Mapping[int, type[BaseModel]],
    path_params: type[BaseModel] | None = None,
    query: type[BaseModel] | None = None,
    body: type[BaseModel] | None = None,
    summary: str = "",
) -> OperationDescriptor:
    """Declara operação com path relativo; o nome vem da chave no router."""
    return OperationDescriptor(
        name="",
        method=method.upper(),
        path=path,
        path_params=path_params,
        query=query,
        body=body,
        responses=MappingProxyType(dict(responses)),
        summary=summary,
    )


def router(
    name: str,
    operations: Mapping[str, OperationDescriptor],
    *,
    path_prefix: str = "",
) -> ResourceContract:
    """Monta o contrato do recurso, aplicando prefixo e checando invariantes.

    Raises:
        ContractDefinitionError: Verbo desconhecido ou placeholders
            divergentes dos campos de path params.
    """
    resolved: dict[str, OperationDescriptor] = {}
    for op_name, descriptor in operations.items():
        full = replace(
            descriptor,
            name=op_name,
            path=_join_path(path_prefix, descriptor.path),
        )
        _check_operation(name, full)
        resolved[op_name] = full
    return ResourceContract(
        name=name,
        path_prefix=path_prefix,
        operations=MappingProxyType(resolved),
    )


def _join_path(prefix: str, path: str) -> str:
    prefix = prefix.rstrip("/")
    if path in ("", "/"):
        return prefix or "/"
    return f"{prefix}/{path.lstrip('/')}"


def _check_operation(resource: str, descriptor: OperationDescriptor) -> None:
    where = f"{resource}.{descriptor.name}"
    if descriptor.method not in HTTP_METHODS:
        raise ContractDefinitionError(f"{where}: método HTTP inválido {descriptor.method!r}")

    placeholders = descriptor.placeholders
    if len(set(placeholders)) != len(placeholders):
        raise ContractDefinitionError(f"{where}: placeholder repetido em {descriptor.path}")

    fields = set(descriptor.path_params.model_fields) if descriptor.path_params else set()
    if set(placeholders) != fields:
        raise ContractDefinitionError(
            f"{where}: placeholders {sorted(placeholders)} não batem com "
            f"path params {sorted(fields)}"
        )
