"""Fetcher autenticado: resolve o bearer token e despacha a operação.

Fluxo por chamada:
1. Busca o access_token no cache; se ausente, troca credenciais e grava
   com TTL = expires_in.
2. Monta a requisição (path, query, corpo, Authorization: Bearer).
3. Loga início, executa, loga sucesso ou erro. Falhas sobem sem alteração.
4. Valida a resposta pelo status (status não declarado = passthrough).

Resolução do token é single-flight dentro do processo: chamadas
concorrentes com cache vazio compartilham uma única troca. Entre
processos (cache Redis) a última escrita vence, o que é aceitável porque
qualquer token emitido é válido.

O timeout do chamador é um prazo único para a chamada inteira: cobre a
espera pelo lock, a troca de credenciais e o despacho do recurso.

Um 401/403 em chamada de recurso não invalida o cache nem é repetido.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from cel_cash.contracts.request import ApiResponse, build_request
from cel_cash.contracts.validation import validate_response
from cel_cash.errors import RequestTimeoutError, ResponseValidationError
from cel_cash.protocols.cache import ACCESS_TOKEN_KEY

if TYPE_CHECKING:
    from pydantic import BaseModel

    from cel_cash.auth.token import TokenAcquirer
    from cel_cash.contracts.router import OperationDescriptor
    from cel_cash.protocols.cache import CredentialCacheProtocol
    from cel_cash.protocols.transport import TransportProtocol

logger = logging.getLogger(__name__)


class AuthenticatedFetcher:
    """Despacha operações do contrato com Authorization: Bearer.

    Args:
        transport: Transporte HTTP
        cache: Cache de credenciais (compartilhado no processo)
        acquirer: Responsável pela troca de credenciais
        base_url: URL base da API
        cache_key: Chave do access_token no cache
    """

    def __init__(
        self,
        transport: TransportProtocol,
        cache: CredentialCacheProtocol,
        acquirer: TokenAcquirer,
        base_url: str,
        cache_key: str = ACCESS_TOKEN_KEY,
    ) -> None:
        self._transport = transport
        self._cache = cache
        self._acquirer = acquirer
        self._base_url = base_url
        self._cache_key = cache_key
        self._token_lock = asyncio.Lock()

    @property
    def transport(self) -> TransportProtocol:
        return self._transport

    async def get_access_token(self, timeout: float | None = None) -> str:
        """Retorna token do cache ou obtém um novo (single-flight).

        Args:
            timeout: Prazo em segundos para espera do lock e troca

        Raises:
            AuthenticationError: Troca recusada (nada é gravado no cache)
            RequestTimeoutError: Prazo expirou antes de obter o token
        """
        if timeout is None:
            return await self._resolve_token()
        try:
            return await asyncio.wait_for(self._resolve_token(), timeout)
        except asyncio.TimeoutError as exc:
            logger.error("cel_cash_token_error", extra={"error_type": "RequestTimeoutError"})
            raise RequestTimeoutError(f"token_timeout após {timeout}s") from exc

    async def _resolve_token(self) -> str:
        token = await self._cache.get(self._cache_key)
        if token:
            return token

        async with self._token_lock:
            # Outra corrotina pode ter gravado enquanto esperávamos o lock
            token = await self._cache.get(self._cache_key)
            if token:
                return token
            credential = await self._acquirer.acquire()
            await self._cache.set(
                self._cache_key,
                credential.access_token,
                credential.expires_in,
            )
            return credential.access_token

    async def call(
        self,
        operation: OperationDescriptor,
        *,
        path_params: BaseModel | None = None,
        query: BaseModel | None = None,
        body: BaseModel | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> ApiResponse:
        """Executa operação com valores já validados.

        Args:
            operation: Operação do contrato
            path_params: Params de path validados
            query: Query validada
            body: Corpo validado
            headers: Headers extras do chamador
            timeout: Prazo total em segundos (token + requisição)

        Returns:
            ApiResponse com corpo validado ou passthrough.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        access_token = await self.get_access_token(timeout=timeout)
        remaining = None if deadline is None else max(deadline - loop.time(), 0.0)
        ctx = build_request(
            operation,
            self._base_url,
            path_params=path_params,
            query=query,
            body=body,
            headers={**(headers or {}), "Authorization": f"Bearer {access_token}"},
        )

        log_extra = {"method": ctx.method, "path": ctx.path, "operation": operation.name}
        logger.info("cel_cash_request", extra=log_extra)
        try:
            response = await self._transport.request(
                ctx.method,
                ctx.url,
                headers=ctx.headers,
                params=ctx.params,
                json=ctx.json,
                timeout=remaining,
            )
        except Exception as exc:
            logger.error(
                "cel_cash_request_error",
                extra={**log_extra, "error_type": type(exc).__name__},
            )
            raise
        logger.info(
            "cel_cash_response",
            extra={**log_extra, "status_code": response.status},
        )

        try:
            payload, validated = validate_response(operation, response.status, response.body)
        except ResponseValidationError:
            logger.error(
                "cel_cash_response_invalid",
                extra={**log_extra, "status_code": response.status},
            )
            raise
        if not validated:
            logger.warning(
                "cel_cash_undeclared_status",
                extra={**log_extra, "status_code": response.status},
            )

        return ApiResponse(
            status=response.status,
            body=payload,
            headers=response.headers,
            validated=validated,
        )
