"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import InfluxDbClientConfig


def build_default_headers(config: InfluxDbClientConfig) -> Mapping[str, str]:
    # /query answers JSON; /write and /ping answer with an empty body.
    # Content negotiation for compression is left to httpx.
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: InfluxDbClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
]
