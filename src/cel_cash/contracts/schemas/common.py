"""Schemas compartilhados entre recursos."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Namespace do identificador usado no path: id do gateway ou id do integrador
TypeId = Literal["galaxPayId", "myId"]


class EmptyBody(BaseModel):
    """Corpo vazio `{}`; chaves extras são descartadas."""


class _PathParams(BaseModel):
    # Ids numéricos e string são aceitos igualmente
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="forbid")


class SubscriptionPathParams(_PathParams):
    subscriptionId: str = Field(min_length=1)
    typeId: TypeId


class TransactionPathParams(_PathParams):
    transactionId: str = Field(min_length=1)
    typeId: TypeId
