"""Testes da troca de credenciais por access_token."""

from __future__ import annotations

import logging

import pytest

from cel_cash.auth import DEFAULT_SCOPES, Credential, TokenAcquirer, basic_authorization
from cel_cash.errors import (
    AuthenticationError,
    RequestTimeoutError,
    ResponseValidationError,
    TransportError,
)
from fakes.fake_transport import BASE_URL, FakeTransport


def _acquirer(transport: FakeTransport) -> TokenAcquirer:
    return TokenAcquirer(transport, BASE_URL, client_id="id", client_secret="hash")


class TestBasicAuthorization:
    def test_encodes_id_and_hash(self) -> None:
        assert basic_authorization("id", "hash") == "Basic aWQ6aGFzaA=="


class TestTokenAcquirer:
    """POST /token com Basic auth e escopos fixos."""

    @pytest.mark.asyncio
    async def test_acquire_returns_credential(self) -> None:
        transport = FakeTransport(expires_in=900)

        credential = await _acquirer(transport).acquire()

        assert credential == Credential(access_token="token-1", expires_in=900)

    @pytest.mark.asyncio
    async def test_request_shape(self) -> None:
        transport = FakeTransport()

        await _acquirer(transport).acquire()

        (request,) = transport.requests
        assert request.method == "POST"
        assert request.path == "/token"
        assert request.headers["Authorization"] == "Basic aWQ6aGFzaA=="
        assert request.json == {
            "grant_type": "authorization_code",
            "scope": list(DEFAULT_SCOPES),
        }

    @pytest.mark.asyncio
    async def test_scopes_are_fixed(self) -> None:
        assert "transactions.write" in DEFAULT_SCOPES
        assert "webhooks.write" not in DEFAULT_SCOPES

        transport = FakeTransport()
        acquirer = _acquirer(transport)
        await acquirer.acquire()
        await acquirer.acquire()

        assert transport.requests[0].json == transport.requests[1].json

    @pytest.mark.asyncio
    async def test_non_200_raises_authentication_error(self) -> None:
        transport = FakeTransport(token_status=403)

        with pytest.raises(AuthenticationError) as exc_info:
            await _acquirer(transport).acquire()

        assert exc_info.value.status_code == 403
        assert exc_info.value.body == {"error": {"message": "Acesso negado"}}
        assert len(transport.requests) == 1  # sem retry

    @pytest.mark.asyncio
    async def test_malformed_success_body_raises(self) -> None:
        transport = FakeTransport(token_body={"token_type": "Bearer"})

        with pytest.raises(ResponseValidationError):
            await _acquirer(transport).acquire()

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self) -> None:
        error = TransportError("http_connection_error")

        class _Failing(FakeTransport):
            async def request(self, method, url, **kwargs):  # type: ignore[override]
                raise error

        with pytest.raises(TransportError) as exc_info:
            await _acquirer(_Failing()).acquire()
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_transport_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = FakeTransport(token_error=RequestTimeoutError("http_timeout"))

        with caplog.at_level(logging.INFO, logger="cel_cash.auth.token"):
            with pytest.raises(RequestTimeoutError):
                await _acquirer(transport).acquire()

        (record,) = [r for r in caplog.records if r.getMessage() == "cel_cash_token_error"]
        assert record.levelno == logging.ERROR
        assert record.error_type == "RequestTimeoutError"

    def test_requires_credentials(self) -> None:
        with pytest.raises(ValueError, match="obrigatórios"):
            TokenAcquirer(FakeTransport(), BASE_URL, client_id="", client_secret="hash")

    def test_credential_repr_hides_token(self) -> None:
        credential = Credential(access_token="secret-token", expires_in=60)
        assert "secret-token" not in repr(credential)
