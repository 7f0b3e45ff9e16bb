"""Configuração de logging estruturado (JSON).

Uso:
    from cel_cash.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="cel_cash")
    logger = get_logger(__name__)
    logger.info("cel_cash_request", extra={"method": "GET", "path": "/transactions"})
"""

from cel_cash.config.logging.config import configure_logging, get_logger
from cel_cash.config.logging.filters import CorrelationIdFilter
from cel_cash.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
