"""Line-protocol write query builder."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

from ..core.errors import InfluxDbInvalidQueryError
from .kinds import QueryType
from .timestamp import Timestamp
from .valid_query import ValidQuery

FieldValue = str | int | float | bool

_MEASUREMENT_ESCAPES = str.maketrans({",": "\\,", " ": "\\ "})
_KEY_ESCAPES = str.maketrans({",": "\\,", " ": "\\ ", "=": "\\="})
_STRING_FIELD_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"'})


def escape_measurement(name: str) -> str:
    return name.translate(_MEASUREMENT_ESCAPES)


def escape_key(text: str) -> str:
    """Escape a tag key, tag value or field key."""

    return text.translate(_KEY_ESCAPES)


def format_field_value(value: FieldValue) -> str:
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return f'"{value.translate(_STRING_FIELD_ESCAPES)}"'
    raise TypeError(f"unsupported field value type: {type(value).__name__}")


def _check_line_text(text: str, what: str) -> None:
    # Line protocol has no escape for line breaks; one would split the point.
    if "\n" in text or "\r" in text:
        raise ValueError(f"{what} cannot contain line breaks: {text!r}")


def _check_field_value(value: object) -> None:
    if not isinstance(value, (str, int, float, bool)):
        raise TypeError("field value must be str, int, float or bool")


def _normalize_pairs(pairs: object, name: str) -> tuple[tuple[str, object], ...]:
    if isinstance(pairs, (str, bytes, Mapping)) or not isinstance(pairs, Iterable):
        raise TypeError(f"{name} must be a sequence of (key, value) pairs")
    normalized: list[tuple[str, object]] = []
    for pair in pairs:
        if not isinstance(pair, tuple | list) or len(pair) != 2:
            raise TypeError(f"{name} must be a sequence of (key, value) pairs")
        key, value = pair
        if not isinstance(key, str):
            raise TypeError(f"{name} keys must be str")
        normalized.append((key, value))
    return tuple(normalized)


@dataclass(slots=True, frozen=True)
class WriteQuery:
    """A single point written through ``/write``.

    Tags and fields keep the order they were added in. The measurement, tag
    keys, tag values and field keys must not contain line breaks; string field
    values may.
    """

    timestamp: Timestamp
    measurement: str
    tags: tuple[tuple[str, str], ...] = field(default=(), kw_only=True)
    fields: tuple[tuple[str, FieldValue], ...] = field(default=(), kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, Timestamp):
            raise TypeError("timestamp must be Timestamp")
        if not isinstance(self.measurement, str):
            raise TypeError("measurement must be str")
        _check_line_text(self.measurement, "measurement")

        tags = _normalize_pairs(self.tags, "tags")
        for key, value in tags:
            if not isinstance(value, str):
                raise TypeError("tag values must be str")
            _check_line_text(key, "tag key")
            _check_line_text(value, "tag value")
        fields = _normalize_pairs(self.fields, "fields")
        for key, value in fields:
            _check_field_value(value)
            _check_line_text(key, "field key")

        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "fields", fields)

    def add_tag(self, key: str, value: object) -> "WriteQuery":
        return replace(self, tags=(*self.tags, (str(key), str(value))))

    def add_field(self, key: str, value: FieldValue) -> "WriteQuery":
        _check_field_value(value)
        return replace(self, fields=(*self.fields, (str(key), value)))

    @property
    def query_type(self) -> QueryType:
        return QueryType.WRITE

    @property
    def precision(self) -> str | None:
        return self.timestamp.precision

    def build(self) -> ValidQuery:
        if not self.fields:
            raise InfluxDbInvalidQueryError("fields cannot be empty")

        tags = "".join(f",{escape_key(key)}={escape_key(value)}" for key, value in self.tags)
        fields = ",".join(
            f"{escape_key(key)}={format_field_value(value)}" for key, value in self.fields
        )
        line = f"{escape_measurement(self.measurement)}{tags} {fields}"
        if not self.timestamp.is_now:
            line = f"{line} {self.timestamp}"
        return ValidQuery(line)


__all__ = [
    "FieldValue",
    "escape_measurement",
    "escape_key",
    "format_field_value",
    "WriteQuery",
]
