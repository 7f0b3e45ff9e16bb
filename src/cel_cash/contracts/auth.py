"""Contrato da troca de credenciais (ID + Hash) por access_token."""

from __future__ import annotations

from cel_cash.contracts.router import operation, router
from cel_cash.contracts.schemas import TokenBody, TokenResponse

auth = router(
    "auth",
    {
        "token": operation(
            "POST",
            "/token",
            body=TokenBody,
            responses={200: TokenResponse},
            summary="Gera access_token via Basic auth",
        ),
    },
)
