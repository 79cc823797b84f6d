"""Decoded query result models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Series:
    """Rows returned for one measurement/tag-set combination."""

    name: str
    columns: tuple[str, ...] | list[str] = ()
    tags: Mapping[str, str] = field(default_factory=dict)
    values: tuple[object, ...] | list[object] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))


@dataclass(slots=True, frozen=True)
class StatementResult:
    """Decoded result of one statement of a (possibly multi-statement) read query."""

    statement_id: int | None
    series: tuple[Series, ...] | list[Series] = ()

    def __post_init__(self) -> None:
        if isinstance(self.series, tuple):
            return
        object.__setattr__(self, "series", tuple(self.series))


__all__ = [
    "Series",
    "StatementResult",
]
