"""Shared response parsing helpers for sync/async clients."""

from __future__ import annotations

import json

from .errors import InfluxDbDatabaseError, InfluxDbDeserializationError

EMBEDDED_ERROR_MARKER = '"error"'


def decode_body_text(body: bytes, *, http_status: int | None = None) -> str:
    """Decode response bytes as UTF-8 and map failures to domain errors."""

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InfluxDbDeserializationError(
            "response could not be converted to UTF-8 encoded string",
            http_status=http_status,
        ) from exc


def raise_for_embedded_error(text: str, *, http_status: int | None = None) -> None:
    """Treat any body mentioning ``"error"`` as a database failure.

    The server answers some failed statements with HTTP 200, so the payload
    has to be inspected regardless of status.
    """

    if EMBEDDED_ERROR_MARKER in text:
        raise InfluxDbDatabaseError(
            f'influxdb error: "{text}"',
            http_status=http_status,
        )


def parse_error_envelope(body: bytes) -> str | None:
    """Return the message of a ``{"error": "..."}`` payload, if ``body`` is one."""

    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    return error if isinstance(error, str) else None


def parse_results_payload(body: bytes, *, http_status: int | None = None) -> list[object]:
    """Parse a ``{"results": [...]}`` payload into its raw result entries."""

    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise InfluxDbDeserializationError(
            f"could not parse response JSON: {exc}",
            http_status=http_status,
        ) from exc
    if not isinstance(payload, dict):
        raise InfluxDbDeserializationError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    results = payload.get("results")
    if not isinstance(results, list):
        raise InfluxDbDeserializationError(
            "response JSON must contain a 'results' list",
            http_status=http_status,
        )
    return results


__all__ = [
    "EMBEDDED_ERROR_MARKER",
    "decode_body_text",
    "raise_for_embedded_error",
    "parse_error_envelope",
    "parse_results_payload",
]
