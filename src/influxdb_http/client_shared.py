"""Shared request preparation and response interpretation for sync/async clients."""

from __future__ import annotations

import logging

from .config import InfluxDbClientConfig
from .core.errors import (
    InfluxDbConfigurationError,
    InfluxDbInvalidQueryError,
    InfluxDbProtocolError,
    classify_http_status,
)
from .core.models import PingResult, PreparedRequest, RawResponse
from .core.response_parsing import decode_body_text, raise_for_embedded_error
from .core.routing import (
    PING_ENDPOINT,
    QUERY_ENDPOINT,
    WRITE_ENDPOINT,
    build_endpoint_url,
    is_read_only_statement,
    select_read_method,
)
from .identity import ConnectionTarget
from .query import Query, ReadQuery, ValidQuery, WriteQuery
from .results.decoder import DatabaseQueryResult, decode_query_results

logger = logging.getLogger("influxdb_http")

VERSION_HEADER = "X-Influxdb-Version"
BUILD_HEADER = "X-Influxdb-Build"


def validate_client_config(config: InfluxDbClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise InfluxDbConfigurationError(str(exc)) from exc


def _require_valid(query: ValidQuery) -> str:
    if not isinstance(query, ValidQuery):
        raise TypeError("only ValidQuery can be transmitted")
    return query.get()


def prepare_ping_request(target: ConnectionTarget) -> PreparedRequest:
    return PreparedRequest(method="GET", url=build_endpoint_url(target.url, PING_ENDPOINT))


def prepare_read_request(target: ConnectionTarget, valid: ValidQuery) -> PreparedRequest:
    text = _require_valid(valid)
    url = build_endpoint_url(
        target.url,
        QUERY_ENDPOINT,
        [*target.basic_parameters(), ("q", text)],
    )
    return PreparedRequest(method=select_read_method(text), url=url)


def prepare_write_request(
    target: ConnectionTarget,
    valid: ValidQuery,
    *,
    precision: str | None,
) -> PreparedRequest:
    text = _require_valid(valid)
    params = target.basic_parameters()
    if precision is not None:
        params.append(("precision", precision))
    url = build_endpoint_url(target.url, WRITE_ENDPOINT, params)
    return PreparedRequest(method="POST", url=url, content=text.encode("utf-8"))


def prepare_query_request(target: ConnectionTarget, query: Query) -> PreparedRequest:
    """Render ``query`` and route it to ``/query`` or ``/write``.

    Rendering happens first so an invalid query never reaches the network.
    """

    if isinstance(query, WriteQuery):
        request = prepare_write_request(target, query.build(), precision=query.precision)
    elif isinstance(query, ReadQuery):
        request = prepare_read_request(target, query.build())
    else:
        raise InfluxDbInvalidQueryError(f"unsupported query type: {type(query).__name__}")
    logger.debug("query dispatch method=%s path=%s", request.method, request.url.path)
    return request


def prepare_json_query_request(target: ConnectionTarget, query: ReadQuery) -> PreparedRequest:
    if not isinstance(query, ReadQuery):
        raise InfluxDbInvalidQueryError(
            "Only SELECT and SHOW queries supported with JSON deserialization"
        )
    valid = query.build()
    if not is_read_only_statement(valid.get()):
        raise InfluxDbInvalidQueryError(
            "Only SELECT and SHOW queries supported with JSON deserialization"
        )
    url = build_endpoint_url(
        target.url,
        QUERY_ENDPOINT,
        [*target.basic_parameters(), ("q", valid.get())],
    )
    logger.debug("json query dispatch path=%s", url.path)
    return PreparedRequest(method="GET", url=url)


def _raise_for_status(response: RawResponse) -> None:
    mapped_error = classify_http_status(response.status_code)
    if mapped_error is not None:
        raise mapped_error


def interpret_query_response(response: RawResponse) -> str:
    _raise_for_status(response)
    text = decode_body_text(response.body, http_status=response.status_code)
    raise_for_embedded_error(text, http_status=response.status_code)
    return text


def interpret_json_query_response(response: RawResponse) -> DatabaseQueryResult:
    _raise_for_status(response)
    return decode_query_results(response.body, http_status=response.status_code)


def interpret_ping_response(response: RawResponse) -> PingResult:
    headers = response.headers
    missing = [name for name in (BUILD_HEADER, VERSION_HEADER) if headers.get(name) is None]
    if missing:
        raise InfluxDbProtocolError(
            f"ping response is missing header(s): {', '.join(missing)}",
            http_status=response.status_code,
        )
    return PingResult(build=headers[BUILD_HEADER], version=headers[VERSION_HEADER])


__all__ = [
    "VERSION_HEADER",
    "BUILD_HEADER",
    "validate_client_config",
    "prepare_ping_request",
    "prepare_read_request",
    "prepare_write_request",
    "prepare_query_request",
    "prepare_json_query_request",
    "interpret_query_response",
    "interpret_json_query_response",
    "interpret_ping_response",
]
