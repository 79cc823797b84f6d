"""Structured decoding of read query results."""

from .decoder import DatabaseQueryResult
from .models import Series, StatementResult

__all__ = [
    "DatabaseQueryResult",
    "Series",
    "StatementResult",
]
