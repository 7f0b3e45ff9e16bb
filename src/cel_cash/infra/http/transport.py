"""Transporte HTTP base para o gateway Cel Cash.

Converte falhas do httpx em exceções do domínio. Não faz retry: a política
de nova tentativa pertence ao chamador.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from cel_cash.errors import RequestTimeoutError, TransportError
from cel_cash.protocols.transport import TransportResponse

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Accept": "application/json"}
    )
    verify_ssl: bool = True


class HttpTransport:
    """Transporte JSON sobre httpx.

    Args:
        config: Configuração HTTP
        client: AsyncClient compartilhado (pool). Se None, abre um cliente
            por requisição.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Executa a requisição.

        Args:
            timeout: Prazo total em segundos definido pelo chamador

        Raises:
            RequestTimeoutError: Prazo (do chamador ou do httpx) expirou
            TransportError: Falha de conexão/protocolo
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        send = self._send(method, url, merged_headers, params, json)
        try:
            if timeout is not None:
                response = await asyncio.wait_for(send, timeout)
            else:
                response = await send
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise RequestTimeoutError(f"http_timeout {method} {url}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"http_connection_error {method} {url}") from exc

        return TransportResponse(
            status=response.status_code,
            body=_decode_body(response),
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Fecha o pool compartilhado, se houver."""
        if self._client is not None:
            await self._client.aclose()

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, Any] | None,
        json: Any,
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                timeout=self._config.timeout_seconds,
            )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.debug(
            "http_non_json_body",
            extra={"status_code": response.status_code},
        )
        return response.text
