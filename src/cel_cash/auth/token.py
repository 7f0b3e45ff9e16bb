"""Troca de credenciais (ID + Hash) por access_token.

Uma única chamada `POST /token` com Basic auth. A lista de escopos é fixa
e enviada sempre, independente da operação que disparou a troca.
Não há retry aqui: falha vira AuthenticationError para o chamador.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cel_cash.contracts.auth import auth
from cel_cash.contracts.request import build_request
from cel_cash.contracts.schemas import TokenBody
from cel_cash.contracts.validation import validate, validate_response
from cel_cash.errors import AuthenticationError, RequestTimeoutError, TransportError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cel_cash.protocols.transport import TransportProtocol

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = (
    "customers.read",
    "customers.write",
    "plans.read",
    "plans.write",
    "transactions.read",
    "transactions.write",
    "cards.read",
    "cards.write",
    "card-brands.read",
    "subscriptions.read",
    "subscriptions.write",
    "charges.read",
    "charges.write",
    "boletos.read",
    "carnes.read",
    "payment-methods.read",
    "antecipation.read",
    "antecipation.write",
)


@dataclass(frozen=True)
class Credential:
    """Bearer token de curta duração."""

    access_token: str
    expires_in: int

    def __repr__(self) -> str:
        return f"Credential(access_token='***', expires_in={self.expires_in})"


def basic_authorization(client_id: str, client_secret: str) -> str:
    """Monta header `Basic base64(id:hash)`."""
    raw = f"{client_id}:{client_secret}".encode()
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


class TokenAcquirer:
    """Obtém access_token no endpoint de autorização.

    Args:
        transport: Transporte HTTP
        base_url: URL base da API (ex: https://api.sandbox.cel.cash/v2)
        client_id: Galax ID
        client_secret: Galax Hash
        scopes: Escopos solicitados (padrão: DEFAULT_SCOPES)
        timeout_seconds: Prazo da troca (None = padrão do transporte)
    """

    def __init__(
        self,
        transport: TransportProtocol,
        base_url: str,
        client_id: str,
        client_secret: str,
        scopes: Sequence[str] = DEFAULT_SCOPES,
        timeout_seconds: float | None = None,
    ) -> None:
        if not client_id or not client_secret:
            raise ValueError("client_id e client_secret são obrigatórios")
        self._transport = transport
        self._base_url = base_url
        self._authorization = basic_authorization(client_id, client_secret)
        self._scopes = tuple(scopes)
        self._timeout = timeout_seconds

    async def acquire(self) -> Credential:
        """Executa a troca.

        Returns:
            Credential com access_token e expires_in.

        Raises:
            AuthenticationError: Status diferente de 200
            ResponseValidationError: 200 sem access_token/expires_in válidos
            TransportError: Falha de rede (logada e propagada sem alteração)
            RequestTimeoutError: Prazo do transporte expirou
        """
        op = auth["token"]
        body = validate(TokenBody, {"scope": list(self._scopes)}, location="body")
        ctx = build_request(
            op,
            self._base_url,
            body=body,
            headers={"Authorization": self._authorization},
        )
        try:
            response = await self._transport.request(
                ctx.method,
                ctx.url,
                headers=ctx.headers,
                json=ctx.json,
                timeout=self._timeout,
            )
        except (TransportError, RequestTimeoutError) as exc:
            logger.error("cel_cash_token_error", extra={"error_type": type(exc).__name__})
            raise

        if response.status != 200:
            logger.warning(
                "cel_cash_token_denied",
                extra={"status_code": response.status},
            )
            raise AuthenticationError(
                "Erro ao obter access_token",
                status_code=response.status,
                body=response.body,
            )

        token, _ = validate_response(op, response.status, response.body)
        logger.info("cel_cash_token_acquired", extra={"expires_in": token.expires_in})
        return Credential(access_token=token.access_token, expires_in=token.expires_in)
