"""Schemas de transações (body, query e respostas).

Nomes de campos seguem exatamente o formato JSON da API Cel Cash
(camelCase e objetos aninhados com inicial maiúscula).
Valores monetários são inteiros em centavos.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ──────────────────────────────────────────────────────────────
# Query
# ──────────────────────────────────────────────────────────────


class ListTransactionsParams(BaseModel):
    """Filtros da listagem. Listas de ids viram string separada por vírgula."""

    startAt: int = Field(ge=0)
    limit: int = Field(ge=1, le=100)
    myIds: str | None = None
    galaxPayIds: str | None = None
    chargeMyIds: str | None = None
    chargeGalaxPayIds: str | None = None
    subscriptionMyIds: str | None = None
    subscriptionGalaxPayIds: str | None = None
    paydayFrom: date | None = None
    paydayTo: date | None = None
    createdAtFrom: str | None = None
    createdAtTo: str | None = None
    createdOrUpdatedFrom: str | None = None
    createdOrUpdatedTo: str | None = None
    status: str | None = None
    order: str | None = None

    @field_validator(
        "myIds",
        "galaxPayIds",
        "chargeMyIds",
        "chargeGalaxPayIds",
        "subscriptionMyIds",
        "subscriptionGalaxPayIds",
        "status",
        mode="before",
    )
    @classmethod
    def _join_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set)):
            return ",".join(str(item) for item in value)
        return value


# ──────────────────────────────────────────────────────────────
# Bodies
# ──────────────────────────────────────────────────────────────


class CardInput(BaseModel):
    """Cartão novo (dados completos) ou já salvo (galaxPayId/myId)."""

    myId: str | None = None
    galaxPayId: int | None = None
    number: str | None = None
    holder: str | None = None
    expiresAt: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}$")
    cvv: str | None = None


class CreditCardPayment(BaseModel):
    Card: CardInput
    qtdInstallments: int | None = Field(default=None, ge=1)
    preAuthorize: bool | None = None


class BoletoPayment(BaseModel):
    fine: int | None = Field(default=None, ge=0)
    interest: int | None = Field(default=None, ge=0)
    instructions: str | None = None
    deadlineDays: int | None = Field(default=None, ge=0)


class PixDeadline(BaseModel):
    type: Literal["days", "minutes"]
    value: int = Field(ge=0)


class PixPayment(BaseModel):
    fine: int | None = Field(default=None, ge=0)
    interest: int | None = Field(default=None, ge=0)
    instructions: str | None = None
    Deadline: PixDeadline | None = None


class AddTransactionBody(BaseModel):
    """Nova transação avulsa dentro de uma assinatura."""

    myId: str = Field(min_length=1)
    value: int = Field(ge=1)
    payday: date
    payedOutsideGalaxPay: bool | None = None
    additionalInfo: str | None = None
    PaymentMethodCreditCard: CreditCardPayment | None = None
    PaymentMethodBoleto: BoletoPayment | None = None
    PaymentMethodPix: PixPayment | None = None


class UpdateTransactionBody(BaseModel):
    myId: str | None = None
    value: int | None = Field(default=None, ge=1)
    payday: date | None = None
    payedOutsideGalaxPay: bool | None = None
    additionalInfo: str | None = None


class ReverseTransactionBody(BaseModel):
    # Sem valor, o estorno é total
    valueToReverse: float | None = Field(default=None, ge=0)


# ──────────────────────────────────────────────────────────────
# Respostas (campos não documentados são preservados)
# ──────────────────────────────────────────────────────────────


class _ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class TransactionData(_ResponseModel):
    galaxPayId: int
    myId: str | None = None
    value: int
    payday: str | None = None
    status: str
    statusDescription: str | None = None
    additionalInfo: str | None = None
    installment: int | None = None
    payedOutsideGalaxPay: bool | None = None
    chargeGalaxPayId: int | None = None
    chargeMyId: str | None = None
    subscriptionGalaxPayId: int | None = None
    subscriptionMyId: str | None = None
    createdAt: str | None = None
    updatedAt: str | None = None
    Boleto: dict[str, Any] | None = None
    Pix: dict[str, Any] | None = None
    CreditCard: dict[str, Any] | None = None


class ListTransactionsResponse(_ResponseModel):
    totalQtdFoundInPage: int
    Transactions: list[TransactionData] = Field(default_factory=list)


class TransactionResponse(_ResponseModel):
    type: bool
    Transaction: TransactionData


class RetryOrReverseTransactionResponse(_ResponseModel):
    type: bool
    Transaction: TransactionData | None = None


class CancelTransactionResponse(_ResponseModel):
    type: bool
