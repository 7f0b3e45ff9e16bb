"""Protocolo do transporte HTTP usado pelo fetcher.

Evita dependência direta de httpx fora de infra/.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Resposta crua: status, corpo JSON decodificado (ou texto) e headers."""

    status: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)


class TransportProtocol(Protocol):
    """Contrato mínimo para transporte HTTP assíncrono."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> TransportResponse: ...
