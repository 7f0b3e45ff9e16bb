"""Filter que carimba service e correlation_id nos records do cliente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Acrescenta `service` e `correlation_id` a cada record.

    Os eventos do fetcher (cel_cash_request, cel_cash_token_error, ...)
    carregam só método, path e status; nunca o bearer token ou o Galax Hash.

    Args:
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id da task atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Um correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
