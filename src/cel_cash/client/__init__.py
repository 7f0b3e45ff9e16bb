"""Clientes por recurso e fachada CelCashService."""

from cel_cash.client.factory import OperationClient, ResourceClient, build_client
from cel_cash.client.service import CelCashService

__all__ = [
    "CelCashService",
    "OperationClient",
    "ResourceClient",
    "build_client",
]
