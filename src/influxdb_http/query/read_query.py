"""Raw InfluxQL read query builder."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .kinds import QueryType
from .valid_query import ValidQuery

STATEMENT_SEPARATOR = ";"


@dataclass(slots=True, frozen=True)
class ReadQuery:
    """One or more raw statements sent together through ``/query``."""

    statements: str | Sequence[str]

    def __post_init__(self) -> None:
        if isinstance(self.statements, str):
            object.__setattr__(self, "statements", (self.statements,))
            return
        if not isinstance(self.statements, Sequence):
            raise TypeError("statements must be str or Sequence[str]")
        normalized: list[str] = []
        for statement in self.statements:
            if not isinstance(statement, str):
                raise TypeError("statements entries must be str")
            normalized.append(statement)
        if not normalized:
            raise ValueError("read query needs at least one statement")
        object.__setattr__(self, "statements", tuple(normalized))

    def add(self, statement: str) -> "ReadQuery":
        if not isinstance(statement, str):
            raise TypeError("statement must be str")
        return replace(self, statements=(*self.statements, statement))

    @property
    def query_type(self) -> QueryType:
        return QueryType.READ

    def build(self) -> ValidQuery:
        return ValidQuery(STATEMENT_SEPARATOR.join(self.statements))


__all__ = [
    "ReadQuery",
]
