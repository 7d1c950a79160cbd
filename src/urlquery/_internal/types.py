"""Shared type aliases used across urlquery modules."""

from collections.abc import Callable

from urlquery._internal.multimap import MultiValueMapping

# A query parser: pure function from a tokenized query to a result (None = absent)
type Parser[A] = Callable[[MultiValueMapping], A]

# Reduces every value seen for one key to a result
type Reducer[A] = Callable[[list[str]], A]
