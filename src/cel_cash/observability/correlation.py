"""correlation_id por task do asyncio.

A aplicação hospedeira define o id antes de chamar o cliente; os logs do
fetcher e da troca de token herdam o valor via CorrelationIdFilter.

    token = set_correlation_id(incoming_id)
    try:
        await service.transactions.list(query={"startAt": 0, "limit": 10})
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("cel_cash_correlation_id", default="")


def get_correlation_id() -> str:
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id da task atual; gera um UUID4 quando omitido."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
