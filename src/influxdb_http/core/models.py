"""Core request/response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple

import httpx


@dataclass(slots=True, frozen=True)
class PreparedRequest:
    method: str
    url: httpx.URL
    content: bytes | None = None


@dataclass(slots=True, frozen=True)
class RawResponse:
    status_code: int
    headers: Mapping[str, str]
    body: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "RawResponse":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )


class PingResult(NamedTuple):
    """Build type and version reported by ``/ping``."""

    build: str
    version: str


__all__ = [
    "PreparedRequest",
    "RawResponse",
    "PingResult",
]
