"""Ordered, duplicate-preserving HTTP header collection.

``Headers`` keeps every ``Header`` in the order it was added. Names are stored
exactly as given and two headers sharing a name are both retained, nothing is
merged or canonicalized.

Lookups match names exactly by default. HTTP treats field names as
case-insensitive, so ``find``/``contains``/``get_all`` accept
``case_sensitive=False`` for callers talking to servers that lowercase
their headers (HTTP/2 always does).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, overload


@dataclass(frozen=True)
class Header:
    """A single immutable header name/value pair."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


def header(name: str, value: str) -> Header:
    return Header(name, value)


def _matches(candidate: str, name: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return candidate == name
    return candidate.lower() == name.lower()


class Headers:
    """Immutable ordered multiset of :class:`Header`.

    Iteration yields ``Header`` objects in insertion order. Equality compares
    the ordered sequence, so all empty collections are equal to each other.
    """

    __slots__ = ("_headers",)

    def __init__(self, items: Iterable[Header] = ()) -> None:
        object.__setattr__(self, "_headers", tuple(items))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Headers:
        return cls(Header(name, value) for name, value in pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Headers:
        return cls.from_pairs(mapping.items())

    @classmethod
    def from_httpx(cls, headers: Any) -> Headers:
        """Build from ``httpx.Headers`` preserving raw order, casing and duplicates.

        Prefers ``headers.raw`` (the bytes pairs exactly as received); falls
        back to ``multi_items()`` for header-like objects without it.
        """
        raw = getattr(headers, "raw", None)
        if raw is not None:
            return cls.from_pairs(
                (k.decode("latin-1"), v.decode("latin-1")) for k, v in raw
            )
        return cls.from_pairs(headers.multi_items())

    def find(self, name: str, *, case_sensitive: bool = True) -> Header | None:
        """Return the first header named ``name``, or ``None``."""
        for item in self._headers:
            if _matches(item.name, name, case_sensitive):
                return item
        return None

    def contains(self, name: str, *, case_sensitive: bool = True) -> bool:
        return self.find(name, case_sensitive=case_sensitive) is not None

    def get_all(self, name: str, *, case_sensitive: bool = True) -> list[str]:
        """Return every value for ``name`` in insertion order."""
        return [
            item.value
            for item in self._headers
            if _matches(item.name, name, case_sensitive)
        ]

    def items(self) -> list[tuple[str, str]]:
        return [(item.name, item.value) for item in self._headers]

    def to_dict(self) -> dict[str, str]:
        """Return a dict view; the last occurrence of a name wins."""
        return {item.name: item.value for item in self._headers}

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Header):
            return name in self._headers
        if not isinstance(name, str):
            return False
        return self.contains(name)

    def __iter__(self) -> Iterator[Header]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __bool__(self) -> bool:
        return bool(self._headers)

    @overload
    def __getitem__(self, index: int) -> Header: ...

    @overload
    def __getitem__(self, index: slice) -> Headers: ...

    def __getitem__(self, index: int | slice) -> Header | Headers:
        if isinstance(index, slice):
            return Headers(self._headers[index])
        return self._headers[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._headers == other._headers

    def __hash__(self) -> int:
        return hash(self._headers)

    def __repr__(self) -> str:
        return f"Headers({list(self._headers)!r})"


EMPTY_HEADERS = Headers()


def headers(*items: Header) -> Headers:
    """Build an ordered collection from zero or more headers."""
    if not items:
        return EMPTY_HEADERS
    return Headers(items)


def empty_headers() -> Headers:
    return EMPTY_HEADERS


__all__ = [
    "EMPTY_HEADERS",
    "Header",
    "Headers",
    "empty_headers",
    "header",
    "headers",
]
