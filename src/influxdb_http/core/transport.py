"""Sync HTTP transport."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import InfluxDbClientConfig
from .errors import InfluxDbConnectionError
from .models import PreparedRequest, RawResponse
from .transport_shared import build_default_headers, build_default_timeout

logger = logging.getLogger("influxdb_http")


class SyncTransportClient(Protocol):
    def request(
        self,
        method: str,
        url: httpx.URL,
        *,
        content: bytes | None = None,
    ) -> httpx.Response: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for InfluxDB HTTP API."""

    def __init__(
        self,
        config: InfluxDbClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def send(self, request: PreparedRequest) -> RawResponse:
        if self._closed:
            raise InfluxDbConnectionError("transport is already closed")

        logger.debug("request start method=%s path=%s", request.method, request.url.path)
        try:
            response = self._client.request(
                request.method,
                request.url,
                content=request.content,
            )
        except Exception as exc:
            raise InfluxDbConnectionError(
                f"network/transport error: {exc}",
                cause=exc.__class__.__name__,
            ) from exc

        logger.debug(
            "response received method=%s path=%s http_status=%s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return RawResponse.from_response(response)


__all__ = [
    "SyncTransport",
]
