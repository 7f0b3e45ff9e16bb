"""Transporte HTTP (httpx)."""

from cel_cash.infra.http.transport import HttpClientConfig, HttpTransport

__all__ = ["HttpClientConfig", "HttpTransport"]
