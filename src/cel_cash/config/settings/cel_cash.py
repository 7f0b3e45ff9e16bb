"""Settings da integração com a API Cel Cash.

Credenciais (Galax ID e Galax Hash) vêm de env ou Secret Manager.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

CEL_CASH_SANDBOX_URL: str = "https://api.sandbox.cel.cash/v2"
CEL_CASH_PRODUCTION_URL: str = "https://api.celcash.com.br/v2"


@dataclass(frozen=True)
class CelCashSettings:
    """Configurações do gateway.

    Attributes:
        base_url: URL base da API (sandbox por padrão)
        client_id: Galax ID
        client_secret: Galax Hash
        request_timeout_seconds: Timeout padrão das requisições HTTP
    """

    base_url: str = CEL_CASH_SANDBOX_URL
    client_id: str = ""
    client_secret: str = ""
    request_timeout_seconds: float = 30.0

    def __repr__(self) -> str:
        # client_secret nunca aparece em logs
        return (
            f"CelCashSettings(base_url={self.base_url!r}, "
            f"client_id={self.client_id!r}, client_secret='***', "
            f"request_timeout_seconds={self.request_timeout_seconds})"
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("CEL_CASH_BASE_URL deve começar com http:// ou https://")

        if not self.client_id:
            errors.append("CEL_CASH_ID não configurado")

        if not self.client_secret:
            errors.append("CEL_CASH_HASH não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("CEL_CASH_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> CelCashSettings:
    return CelCashSettings(
        base_url=os.getenv("CEL_CASH_BASE_URL", CEL_CASH_SANDBOX_URL),
        client_id=os.getenv("CEL_CASH_ID", ""),
        client_secret=os.getenv("CEL_CASH_HASH", ""),
        request_timeout_seconds=float(
            os.getenv("CEL_CASH_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_cel_cash_settings() -> CelCashSettings:
    """Retorna instância cacheada de CelCashSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
