"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from cel_cash.config.settings import (
    CEL_CASH_SANDBOX_URL,
    BaseSettings,
    CacheSettings,
    CelCashSettings,
    get_base_settings,
    get_cache_settings,
    get_cel_cash_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_cache_settings.cache_clear()
    get_cel_cash_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_cache_settings.cache_clear()
    get_cel_cash_settings.cache_clear()


class TestCelCashSettings:
    """Credenciais e URL do gateway."""

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEL_CASH_BASE_URL", "https://api.celcash.com.br/v2")
        monkeypatch.setenv("CEL_CASH_ID", "5473")
        monkeypatch.setenv("CEL_CASH_HASH", "83Mw5u8988Qj6fZqS4Z8K7LzOo1j28S706R0BeFe")
        monkeypatch.setenv("CEL_CASH_REQUEST_TIMEOUT_SECONDS", "12.5")

        settings = get_cel_cash_settings()

        assert settings.base_url == "https://api.celcash.com.br/v2"
        assert settings.client_id == "5473"
        assert settings.request_timeout_seconds == 12.5
        assert settings.validate() == []

    def test_defaults_to_sandbox(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CEL_CASH_BASE_URL", raising=False)
        assert get_cel_cash_settings().base_url == CEL_CASH_SANDBOX_URL

    def test_getter_is_cached(self) -> None:
        assert get_cel_cash_settings() is get_cel_cash_settings()

    def test_validate_reports_missing_credentials(self) -> None:
        errors = CelCashSettings(base_url="ftp://x", request_timeout_seconds=0).validate()
        assert "CEL_CASH_ID não configurado" in errors
        assert "CEL_CASH_HASH não configurado" in errors
        assert any("CEL_CASH_BASE_URL" in e for e in errors)
        assert any("TIMEOUT" in e for e in errors)

    def test_repr_hides_secret(self) -> None:
        settings = CelCashSettings(client_id="id", client_secret="super-secret")
        assert "super-secret" not in repr(settings)


class TestBaseAndCacheSettings:
    """Ambiente e backend de cache."""

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production is True

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEL_CASH_CACHE_BACKEND", "memcached")
        assert get_cache_settings().backend == "memory"

    def test_redis_backend_requires_url(self) -> None:
        errors = CacheSettings(backend="redis").validate(BaseSettings(redis_url=""))
        assert errors == ["CEL_CASH_CACHE_BACKEND=redis requer REDIS_URL configurado"]

    def test_memory_backend_flagged_in_production(self) -> None:
        errors = CacheSettings(backend="memory").validate(BaseSettings(environment="production"))
        assert len(errors) == 1

    def test_base_validate(self) -> None:
        assert BaseSettings().validate() == []
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]
