"""Immutable, ordered query parameter multimap.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class QueryMapping(Mapping[str, str]):
    """Immutable query parameters, in the order they appeared.

    Attributes:
        _data: Field name -> tuple of values. Keys keep first-appearance
            order, values keep occurrence order.
        _pairs: Every ``(key, value)`` pair in raw-string order.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    A key is either present with one or more values or absent; it is
    never present with an empty sequence. Empty keys are dropped.
    """

    _data: dict[str, tuple[str, ...]]
    _pairs: tuple[tuple[str, str], ...]

    __slots__ = ("_data", "_pairs")

    def __init__(self, data: Mapping[str, Iterable[str]] | None = None) -> None:
        frozen = {key: tuple(values) for key, values in (data or {}).items()}
        frozen = {key: values for key, values in frozen.items() if key and values}
        object.__setattr__(self, "_data", frozen)
        object.__setattr__(
            self,
            "_pairs",
            tuple((key, value) for key, values in frozen.items() for value in values),
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> QueryMapping:
        """Build a mapping from ``(key, value)`` pairs, keeping order and duplicates."""
        ordered = tuple((key, value) for key, value in pairs if key)
        grouped: dict[str, list[str]] = {}
        for key, value in ordered:
            grouped.setdefault(key, []).append(value)
        mapping = cls(grouped)
        object.__setattr__(mapping, "_pairs", ordered)
        return mapping

    def __setattr__(self, name: str, value: Any) -> None:
        msg = "QueryMapping is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryMapping):
            return NotImplemented
        return list(self._data.items()) == list(other._data.items())

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self._data.items())
        return f"QueryMapping({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, or an empty list if missing."""
        return list(self._data.get(key, ()))

    def multi_items(self) -> list[tuple[str, str]]:
        """Return every ``(key, value)`` pair in the order it was parsed."""
        return list(self._pairs)
