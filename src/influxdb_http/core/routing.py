"""Endpoint URL construction and HTTP method routing."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from .errors import InfluxDbUrlConstructionError

PING_ENDPOINT = "ping"
QUERY_ENDPOINT = "query"
WRITE_ENDPOINT = "write"

_READ_ONLY_KEYWORDS = ("SELECT", "SHOW")
_SUPPORTED_SCHEMES = frozenset({"http", "https"})


def is_read_only_statement(rendered: str) -> bool:
    """Whether the server routes ``rendered`` as a read through ``GET``.

    Case-sensitive substring match anywhere in the text, mirroring the
    server's own routing of ``/query`` requests.
    """

    return any(keyword in rendered for keyword in _READ_ONLY_KEYWORDS)


def select_read_method(rendered: str) -> str:
    return "GET" if is_read_only_statement(rendered) else "POST"


def build_endpoint_url(
    base_url: str,
    endpoint: str,
    params: Sequence[tuple[str, str]] = (),
) -> httpx.URL:
    try:
        url = httpx.URL(f"{base_url.rstrip('/')}/{endpoint}", params=list(params))
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InfluxDbUrlConstructionError(
            f"could not build URL from {base_url!r}: {exc}",
            cause="url",
        ) from exc
    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        raise InfluxDbUrlConstructionError(
            f"base URL must be an absolute http(s) URL: {base_url!r}",
            cause="url",
        )
    return url


__all__ = [
    "PING_ENDPOINT",
    "QUERY_ENDPOINT",
    "WRITE_ENDPOINT",
    "is_read_only_statement",
    "select_read_method",
    "build_endpoint_url",
]
