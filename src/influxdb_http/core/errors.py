"""Error types and status mapping."""

from __future__ import annotations

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403


class InfluxDbError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class InfluxDbInvalidQueryError(InfluxDbError):
    """Query failed to render or is not supported by the endpoint."""


class InfluxDbUrlConstructionError(InfluxDbError):
    """Base URL and parameters do not form a valid URL."""


class InfluxDbConnectionError(InfluxDbError):
    """Network/transport-level failure."""


class InfluxDbAuthorizationError(InfluxDbError):
    """Server answered 401."""


class InfluxDbAuthenticationError(InfluxDbError):
    """Server answered 403."""


class InfluxDbDatabaseError(InfluxDbError):
    """Server accepted the request but reported an error in the body."""


class InfluxDbDeserializationError(InfluxDbError):
    """Response body is not text or does not have the expected shape."""


class InfluxDbProtocolError(InfluxDbError):
    """Ping exchange failed or violated the server contract."""


class InfluxDbClientClosedError(InfluxDbError):
    """Raised when client is used after close."""


class InfluxDbConfigurationError(InfluxDbError):
    """Invalid client configuration."""


def classify_http_status(http_status: int | None) -> InfluxDbError | None:
    """Map HTTP status to domain exceptions.

    Only 401 and 403 are decided here; every other status falls through to
    body inspection.
    """

    if http_status == HTTP_UNAUTHORIZED:
        return InfluxDbAuthorizationError(
            "authorization failed",
            http_status=http_status,
        )
    if http_status == HTTP_FORBIDDEN:
        return InfluxDbAuthenticationError(
            "authentication failed",
            http_status=http_status,
        )
    return None


__all__ = [
    "InfluxDbError",
    "InfluxDbInvalidQueryError",
    "InfluxDbUrlConstructionError",
    "InfluxDbConnectionError",
    "InfluxDbAuthorizationError",
    "InfluxDbAuthenticationError",
    "InfluxDbDatabaseError",
    "InfluxDbDeserializationError",
    "InfluxDbProtocolError",
    "InfluxDbClientClosedError",
    "InfluxDbConfigurationError",
    "classify_http_status",
]
