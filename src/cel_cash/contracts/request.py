"""Contexto por requisição e resposta tipada devolvida ao chamador."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cel_cash.contracts.validation import dump
from cel_cash.errors import UnexpectedStatusError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from cel_cash.contracts.router import OperationDescriptor


@dataclass(frozen=True)
class RequestContext:
    """Estado transitório de uma chamada (descartado após a resposta)."""

    method: str
    path: str
    url: str
    headers: dict[str, str]
    params: dict[str, Any] | None = None
    json: Any = None


@dataclass(frozen=True)
class ApiResponse:
    """Resultado de uma operação.

    Attributes:
        status: Status HTTP devolvido pelo gateway
        body: Modelo validado (status declarado) ou corpo cru (passthrough)
        headers: Headers da resposta
        validated: False quando o status não tem schema declarado
    """

    status: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)
    validated: bool = True

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def expect_declared(self) -> Any:
        """Retorna o corpo validado ou falha se a resposta foi passthrough.

        Raises:
            UnexpectedStatusError: Status sem schema declarado.
        """
        if not self.validated:
            raise UnexpectedStatusError(
                f"Status {self.status} sem schema declarado",
                status_code=self.status,
                body=self.body,
            )
        return self.body


def build_request(
    operation: OperationDescriptor,
    base_url: str,
    *,
    path_params: BaseModel | None = None,
    query: BaseModel | None = None,
    body: BaseModel | None = None,
    headers: dict[str, str] | None = None,
) -> RequestContext:
    """Monta path, URL, query e corpo a partir de valores já validados."""
    path = operation.render_path(dump(path_params) if path_params is not None else {})
    request_headers = dict(headers or {})
    payload: Any = None
    if operation.body is not None:
        payload = dump(body) if body is not None else {}
        request_headers.setdefault("Content-Type", "application/json")
    return RequestContext(
        method=operation.method,
        path=path,
        url=f"{base_url.rstrip('/')}{path}",
        headers=request_headers,
        params=dump(query) if query is not None else None,
        json=payload,
    )
