"""Rendered query text that passed a query's build step."""

from __future__ import annotations


class ValidQuery:
    """Opaque rendered query; the only form the clients will transmit."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("query text must be str")
        self._text = text

    def get(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"ValidQuery({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidQuery):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)


__all__ = [
    "ValidQuery",
]
