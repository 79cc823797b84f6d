"""Public client entrypoint."""

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
from .core.errors import (
    InfluxDbClientClosedError,
    InfluxDbConnectionError,
    InfluxDbProtocolError,
    InfluxDbUrlConstructionError,
)
from .core.models import PingResult
from .core.transport import SyncTransport
from .identity import ConnectionTarget
from .query import Query, ReadQuery
from .results.decoder import DatabaseQueryResult


class _TransportHandle:
    """Transport shared by a client and every client derived from it."""

    def __init__(self, transport: SyncTransport) -> None:
        self.transport = transport
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.transport.close()
        self.closed = True


class InfluxDbClient:
    """Client which can read and write data from InfluxDB.

    ``url`` is where InfluxDB is running (e.g. ``http://localhost:8086``) and
    ``database`` the database every query and write runs against.
    """

    def __init__(
        self,
        url: str,
        database: str,
        *,
        config: InfluxDbClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or InfluxDbClientConfig()
        validate_client_config(self._config)

        self._target = ConnectionTarget(url=str(url), database=str(database))
        self._handle = _TransportHandle(transport or SyncTransport(self._config))

    @classmethod
    def _derived(
        cls,
        source: "InfluxDbClient",
        target: ConnectionTarget,
    ) -> "InfluxDbClient":
        client = cls.__new__(cls)
        client._config = source._config
        client._target = target
        client._handle = source._handle
        return client

    def with_auth(self, username: str, password: str) -> "InfluxDbClient":
        """Return a client sending ``username``/``password``; this one is unchanged.

        Both clients share the same transport.
        """

        return self._derived(self, self._target.with_credentials(username, password))

    def database_name(self) -> str:
        return self._target.database

    def database_url(self) -> str:
        return self._target.url

    def basic_parameters(self) -> list[tuple[str, str]]:
        return self._target.basic_parameters()

    def ping(self) -> PingResult:
        """Return build type and version reported by the server."""

        self._ensure_open()
        try:
            response = self._handle.transport.send(prepare_ping_request(self._target))
        except (InfluxDbConnectionError, InfluxDbUrlConstructionError) as exc:
            raise InfluxDbProtocolError(str(exc), cause=exc.cause) from exc
        return interpret_ping_response(response)

    def query(self, query: Query) -> str:
        """Send a read or write query and return the raw response text."""

        self._ensure_open()
        request = prepare_query_request(self._target, query)
        return interpret_query_response(self._handle.transport.send(request))

    def json_query(self, query: ReadQuery) -> DatabaseQueryResult:
        """Send a ``SELECT``/``SHOW`` query and return its decodable results."""

        self._ensure_open()
        request = prepare_json_query_request(self._target, query)
        return interpret_json_query_response(self._handle.transport.send(request))

    def _ensure_open(self) -> None:
        if self._handle.closed:
            raise InfluxDbClientClosedError("InfluxDbClient is already closed")

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "InfluxDbClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "InfluxDbClient",
]
