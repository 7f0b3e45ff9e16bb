"""Validação de schemas para params, query, body e respostas.

Schemas são modelos pydantic. Este módulo traduz falhas do pydantic para
`cel_cash.errors.ValidationError` e aplica a regra de passthrough para
status de resposta não documentados.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cel_cash.errors import ResponseValidationError, ValidationError

if TYPE_CHECKING:
    from cel_cash.contracts.router import OperationDescriptor

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate(schema: type[ModelT], value: Any, *, location: str) -> ModelT:
    """Valida `value` contra `schema`.

    Args:
        schema: Modelo pydantic declarado no contrato
        value: Dict (ou instância do próprio modelo) vindo do chamador
        location: params, query, body ou response (para a mensagem de erro)

    Returns:
        Instância validada (com coerções aplicadas).

    Raises:
        ValidationError: Se o valor não satisfaz o schema.
    """
    if isinstance(value, schema):
        return value
    if value is None:
        value = {}
    try:
        return schema.model_validate(value)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"{location} inválido para {schema.__name__}",
            location=location,
            errors=_plain_errors(exc),
        ) from exc


def dump(model: BaseModel) -> dict[str, Any]:
    """Serializa modelo validado para JSON (aliases, sem campos None)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_response(
    operation: OperationDescriptor,
    status_code: int,
    body: Any,
) -> tuple[Any, bool]:
    """Valida corpo da resposta pelo status exato.

    Returns:
        (body, validated). Status sem schema declarado volta cru com
        validated=False.

    Raises:
        ResponseValidationError: Status declarado com corpo fora do schema.
    """
    schema = operation.responses.get(status_code)
    if schema is None:
        return body, False
    try:
        return schema.model_validate(body), True
    except PydanticValidationError as exc:
        raise ResponseValidationError(
            f"Resposta {status_code} de {operation.name} fora do schema",
            status_code=status_code,
            errors=_plain_errors(exc),
        ) from exc


def _plain_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    # include_input=False evita carregar dados do cliente para logs
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False, include_input=False)
    ]
