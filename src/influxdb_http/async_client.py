"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import (
    interpret_json_query_response,
    interpret_ping_response,
    interpret_query_response,
    prepare_json_query_request,
    prepare_ping_request,
    prepare_query_request,
    validate_client_config,
)
from .config import InfluxDbClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import (
    InfluxDbClientClosedError,
    InfluxDbConnectionError,
    InfluxDbProtocolError,
    InfluxDbUrlConstructionError,
)
from .core.models import PingResult
from .identity import ConnectionTarget
from .query import Query, ReadQuery
from .results.decoder import DatabaseQueryResult


class _AsyncTransportHandle:
    """Transport shared by an async client and every client derived from it."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transport = transport
        self.closed = False

    async def close(self) -> None:
        if self.closed:
            return
        await self.transport.close()
        self.closed = True


class AsyncInfluxDbClient:
    """Async client which can read and write data from InfluxDB."""

    def __init__(
        self,
        url: str,
        database: str,
        *,
        config: InfluxDbClientConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or InfluxDbClientConfig()
        validate_client_config(self._config)

        self._target = ConnectionTarget(url=str(url), database=str(database))
        self._handle = _AsyncTransportHandle(transport or AsyncTransport(self._config))

    @classmethod
    def _derived(
        cls,
        source: "AsyncInfluxDbClient",
        target: ConnectionTarget,
    ) -> "AsyncInfluxDbClient":
        client = cls.__new__(cls)
        client._config = source._config
        client._target = target
        client._handle = source._handle
        return client

    def with_auth(self, username: str, password: str) -> "AsyncInfluxDbClient":
        return self._derived(self, self._target.with_credentials(username, password))

    def database_name(self) -> str:
        return self._target.database

    def database_url(self) -> str:
        return self._target.url

    def basic_parameters(self) -> list[tuple[str, str]]:
        return self._target.basic_parameters()

    async def ping(self) -> PingResult:
        self._ensure_open()
        try:
            response = await self._handle.transport.send(prepare_ping_request(self._target))
        except (InfluxDbConnectionError, InfluxDbUrlConstructionError) as exc:
            raise InfluxDbProtocolError(str(exc), cause=exc.cause) from exc
        return interpret_ping_response(response)

    async def query(self, query: Query) -> str:
        self._ensure_open()
        request = prepare_query_request(self._target, query)
        return interpret_query_response(await self._handle.transport.send(request))

    async def json_query(self, query: ReadQuery) -> DatabaseQueryResult:
        self._ensure_open()
        request = prepare_json_query_request(self._target, query)
        return interpret_json_query_response(await self._handle.transport.send(request))

    def _ensure_open(self) -> None:
        if self._handle.closed:
            raise InfluxDbClientClosedError("AsyncInfluxDbClient is already closed")

    async def close(self) -> None:
        await self._handle.close()

    async def __aenter__(self) -> "AsyncInfluxDbClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncInfluxDbClient",
]
