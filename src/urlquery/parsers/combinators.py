"""Combinators — build parsers out of parsers.

Every child parser runs against the same query, every time. There is
no short-circuit: a child that yields ``None`` still hands ``None`` to
*fn*, and *fn* alone decides what absence means for the result::

    def both(page: int | None, size: int | None) -> tuple[int, int] | None:
        if page is None or size is None:
            return None
        return (page, size)

    paging = map2(both, integer("page"), integer("size"))

If you want a fallback instead, write *fn* that way::

    page = map(lambda p: 1 if p is None else p, integer("page"))
"""

from collections.abc import Callable
from typing import Any

from urlquery._internal.multimap import MultiValueMapping
from urlquery._internal.types import Parser


def succeed[A](value: A) -> Parser[A]:
    """A parser that ignores the query and always returns *value*."""

    def parser(query: MultiValueMapping) -> A:
        return value

    return parser


def map[A, B](fn: Callable[[A], B], p: Parser[A]) -> Parser[B]:  # noqa: A001
    """Transform the result of *p* with *fn*."""

    def parser(query: MultiValueMapping) -> B:
        return fn(p(query))

    return parser


def map2[A, B, R](fn: Callable[[A, B], R], p1: Parser[A], p2: Parser[B]) -> Parser[R]:
    """Combine the results of two parsers with *fn*."""

    def parser(query: MultiValueMapping) -> R:
        return fn(p1(query), p2(query))

    return parser


def map3[A, B, C, R](
    fn: Callable[[A, B, C], R],
    p1: Parser[A],
    p2: Parser[B],
    p3: Parser[C],
) -> Parser[R]:
    """Combine the results of three parsers with *fn*."""

    def parser(query: MultiValueMapping) -> R:
        return fn(p1(query), p2(query), p3(query))

    return parser


def map_all[R](fn: Callable[..., R], *parsers: Parser[Any]) -> Parser[R]:
    """Combine any number of parsers with *fn*, positionally.

    ``map_all(fn, p1, p2)`` behaves exactly like ``map2(fn, p1, p2)``.
    """
    children = tuple(parsers)

    def parser(query: MultiValueMapping) -> R:
        return fn(*[child(query) for child in children])

    return parser
