"""Schemas da troca de credenciais por access_token."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class TokenBody(BaseModel):
    grant_type: Literal["authorization_code"] = "authorization_code"
    scope: list[str] = Field(min_length=1)


class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str = Field(min_length=1)
    expires_in: int = Field(ge=0)
    token_type: str | None = None
    scope: str | None = None
