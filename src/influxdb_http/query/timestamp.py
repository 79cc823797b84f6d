"""Write timestamps and their precision."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class TimeUnit(enum.Enum):
    """Timestamp unit; the value is the ``precision`` request parameter."""

    NANOSECONDS = "ns"
    MICROSECONDS = "u"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"

    @property
    def precision(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Timestamp:
    """Either "now" (no value, server assigns time) or a non-negative integer in a unit.

    Renders to the bare decimal integer; the unit travels separately as the
    write ``precision`` parameter.
    """

    NOW: ClassVar["Timestamp"]

    value: int | None = None
    unit: TimeUnit | None = None

    def __post_init__(self) -> None:
        if self.value is None and self.unit is None:
            return
        if self.value is None or self.unit is None:
            raise ValueError("timestamp value and unit must be given together")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("timestamp value must be int")
        if not isinstance(self.unit, TimeUnit):
            raise TypeError("timestamp unit must be TimeUnit")
        if self.value < 0:
            raise ValueError("timestamp value must be >= 0")

    @property
    def is_now(self) -> bool:
        return self.unit is None

    @property
    def precision(self) -> str | None:
        return None if self.unit is None else self.unit.precision

    @classmethod
    def nanoseconds(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.NANOSECONDS)

    @classmethod
    def microseconds(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.MICROSECONDS)

    @classmethod
    def milliseconds(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.MILLISECONDS)

    @classmethod
    def seconds(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.SECONDS)

    @classmethod
    def minutes(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.MINUTES)

    @classmethod
    def hours(cls, value: int) -> "Timestamp":
        return cls(value, TimeUnit.HOURS)

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)


Timestamp.NOW = Timestamp()


__all__ = [
    "TimeUnit",
    "Timestamp",
]
