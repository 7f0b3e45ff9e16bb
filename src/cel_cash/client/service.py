"""Fachada Cel Cash: um cliente por recurso, todos sobre o mesmo fetcher."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cel_cash.client.factory import ResourceClient, build_client
from cel_cash.contracts import CONTRACTS

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from cel_cash.auth.fetcher import AuthenticatedFetcher
    from cel_cash.contracts.router import ResourceContract

logger = logging.getLogger(__name__)


class CelCashService:
    """Ponto de entrada do cliente.

    Os clientes de recurso são criados a cada acesso; são imutáveis e
    baratos, e compartilham o fetcher (e portanto o cache de token).

    Args:
        fetcher: Fetcher autenticado
        contracts: Registro de recursos (padrão: CONTRACTS)
    """

    def __init__(
        self,
        fetcher: AuthenticatedFetcher,
        contracts: Mapping[str, ResourceContract] = CONTRACTS,
    ) -> None:
        self._fetcher = fetcher
        self._contracts = contracts
        logger.info(
            "cel_cash_service_initialized",
            extra={"resources": sorted(contracts)},
        )

    @property
    def transactions(self) -> ResourceClient:
        return self.resource("transactions")

    def resource(self, name: str) -> ResourceClient:
        """Retorna cliente do recurso pelo nome.

        Raises:
            KeyError: Recurso não registrado.
        """
        return build_client(self._contracts[name], self._fetcher)

    def resources(self) -> tuple[str, ...]:
        return tuple(sorted(self._contracts))

    async def aclose(self) -> None:
        """Libera o pool HTTP do transporte, se houver."""
        close = getattr(self._fetcher.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> CelCashService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
