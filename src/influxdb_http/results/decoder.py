"""Decoding of ``/query`` JSON payloads into typed statement results."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..core.errors import (
    InfluxDbDatabaseError,
    InfluxDbDeserializationError,
)
from ..core.response_parsing import parse_error_envelope, parse_results_payload
from .models import Series, StatementResult

JsonObject = dict[str, object]
RowFactory = Callable[..., Any]


def _as_object(value: object, *, what: str) -> JsonObject:
    if not isinstance(value, dict):
        raise InfluxDbDeserializationError(f"could not deserialize: {what} must be an object")
    return value


def _as_list(value: object, *, what: str) -> list[object]:
    if not isinstance(value, list):
        raise InfluxDbDeserializationError(f"could not deserialize: {what} must be a list")
    return value


def _decode_row(row: object, row_type: RowFactory | None) -> object:
    values = _as_list(row, what="series row")
    if row_type is None:
        return tuple(values)
    try:
        return row_type(*values)
    except (TypeError, ValueError) as exc:
        raise InfluxDbDeserializationError(f"could not deserialize: {exc}") from exc


def _decode_tags(raw: object) -> Mapping[str, str]:
    if raw is None:
        return {}
    tags = _as_object(raw, what="series tags")
    return {str(key): str(value) for key, value in tags.items()}


def _decode_series(raw: object, row_type: RowFactory | None) -> Series:
    item = _as_object(raw, what="series")
    name = item.get("name")
    if not isinstance(name, str):
        raise InfluxDbDeserializationError("could not deserialize: series name must be a string")
    rows = _as_list(item.get("values"), what="series values")
    columns = item.get("columns", [])
    return Series(
        name=name,
        columns=tuple(str(column) for column in _as_list(columns, what="series columns")),
        tags=_decode_tags(item.get("tags")),
        values=tuple(_decode_row(row, row_type) for row in rows),
    )


def decode_statement_result(
    raw: object,
    *,
    row_type: RowFactory | None = None,
) -> StatementResult:
    entry = _as_object(raw, what="result entry")
    error = entry.get("error")
    if isinstance(error, str):
        raise InfluxDbDatabaseError(error)

    statement_id = entry.get("statement_id")
    if statement_id is not None and (isinstance(statement_id, bool) or not isinstance(statement_id, int)):
        raise InfluxDbDeserializationError("could not deserialize: statement_id must be an integer")

    # Statements without matching data come back without a "series" key.
    raw_series = entry.get("series", [])
    return StatementResult(
        statement_id=statement_id,
        series=tuple(
            _decode_series(item, row_type) for item in _as_list(raw_series, what="series list")
        ),
    )


class DatabaseQueryResult:
    """Raw result entries of one ``/query`` exchange, decoded one at a time.

    Entries are positional: the n-th entry belongs to the n-th statement of
    the query. Each entry is consumed by exactly one ``decode_next`` call,
    whether or not decoding it succeeds.
    """

    def __init__(self, results: Iterable[object]) -> None:
        self._results: deque[object] = deque(results)

    @property
    def remaining(self) -> int:
        return len(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def decode_next(self, row_type: RowFactory | None = None) -> StatementResult:
        """Decode the first unconsumed entry.

        ``row_type`` is called with each row's values as positional
        arguments; rows stay plain tuples when it is omitted.
        """

        if not self._results:
            raise InfluxDbDeserializationError("no results left to decode")
        return decode_statement_result(self._results.popleft(), row_type=row_type)


def decode_query_results(body: bytes, *, http_status: int | None = None) -> DatabaseQueryResult:
    error = parse_error_envelope(body)
    if error is not None:
        raise InfluxDbDatabaseError(error, http_status=http_status)
    return DatabaseQueryResult(parse_results_payload(body, http_status=http_status))


__all__ = [
    "DatabaseQueryResult",
    "decode_statement_result",
    "decode_query_results",
]
