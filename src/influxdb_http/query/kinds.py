"""Query kind marker."""

from __future__ import annotations

import enum


class QueryType(enum.Enum):
    READ = "read"
    WRITE = "write"


__all__ = [
    "QueryType",
]
