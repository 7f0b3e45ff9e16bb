"""Exceções do cliente Cel Cash.

Cada categoria de falha tem sua própria classe para que o chamador consiga
distinguir, por exemplo, um 401 do gateway de um request mal-formado.
"""

from __future__ import annotations

from typing import Any


class CelCashError(Exception):
    """Base para todas as falhas do cliente Cel Cash."""


class ContractDefinitionError(CelCashError):
    """Contrato declarado de forma inconsistente (detectado na inicialização)."""


class ValidationError(CelCashError):
    """Entrada ou resposta não passou na validação de schema.

    Attributes:
        location: Onde a falha ocorreu (params, query, body, response)
        errors: Lista de erros de campo (formato pydantic)
    """

    def __init__(
        self,
        message: str,
        location: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.location = location
        self.errors = errors or []


class AuthenticationError(CelCashError):
    """Troca de credenciais por access_token falhou (status != 200)."""

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(CelCashError):
    """Falha de rede ao falar com o gateway."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseValidationError(TransportError):
    """Resposta com status documentado não bate com o schema declarado."""

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.errors = errors or []


class RequestTimeoutError(CelCashError):
    """Timeout informado pelo chamador expirou antes da resposta."""


class UnexpectedStatusError(CelCashError):
    """Status sem schema declarado quando o chamador exige o formato documentado."""

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CacheUnavailableError(CelCashError):
    """Falha de conexão/timeout ao acessar o cache de credenciais."""
