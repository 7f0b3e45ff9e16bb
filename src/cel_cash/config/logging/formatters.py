"""Formatter JSON dos eventos do cliente Cel Cash.

Cada linha traz timestamp, level, logger, message, service e
correlation_id. O que for passado em `extra` (method, path, operation,
status_code, error_type) vira chave no mesmo objeto.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter para um evento de despacho, por exemplo:

        {"level": "INFO", "logger": "cel_cash.auth.fetcher",
         "message": "cel_cash_request", "method": "PUT",
         "path": "/transactions/123/myId/reverse", ...}
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
