"""MultiValueMapping protocol: what a parser may read from a query.

Parsers only ever ask for every value of one key, so any object with
``get_list`` and ordered key iteration can stand in for ``QueryMapping``,
e.g. a framework's own query-params type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """Read-only, ordered view of a tokenized query.

    ``get_list`` returns every value for a key in occurrence order, as a
    fresh list, or ``[]`` when the key is absent. Keys iterate in order of
    first appearance. ``multi_items`` returns every pair in raw order.
    """

    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get_list(self, key: str) -> list[str]: ...
    def multi_items(self) -> list[tuple[str, str]]: ...
