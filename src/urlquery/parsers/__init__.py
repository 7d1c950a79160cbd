"""Query parsers — composable primitives, one entry point.

Usage::

    from urlquery.parsers import enum, integer, map3, parse, string

    search = map3(
        lambda q, page, debug: (q, page or 1, bool(debug)),
        string("q"),
        integer("page"),
        enum("debug", {"true": True, "false": False}),
    )

    parse(search, "?q=cats&page=2")  # ("cats", 2, False)
"""

import logging

from urlquery._internal.types import Parser, Reducer
from urlquery.config import DEFAULT_CONFIG, QueryConfig
from urlquery.errors import AbsenceReason, TokenizeError
from urlquery.parsers.combinators import map, map2, map3, map_all, succeed  # noqa: A004
from urlquery.parsers.primitives import custom, enum, integer, number, string
from urlquery.tokenizer import tokenize

__all__ = [
    "Parser",
    "Reducer",
    "custom",
    "enum",
    "integer",
    "map",
    "map2",
    "map3",
    "map_all",
    "number",
    "parse",
    "string",
    "succeed",
]

logger = logging.getLogger("urlquery.parsers")


def parse[A](
    parser: Parser[A],
    raw: str | bytes,
    config: QueryConfig = DEFAULT_CONFIG,
) -> A | None:
    """Tokenize *raw* and run *parser* over it.

    Args:
        parser: Any parser built from primitives and combinators.
        raw: The query part of a URL, with or without the leading ``?``.
        config: Tokenizer settings.

    Returns:
        Whatever *parser* returns, or ``None`` when *raw* could not be
        tokenized at all.

    Exceptions raised inside caller-supplied functions (combinator
    ``fn``, ``custom`` reducers) are not caught.
    """
    try:
        query = tokenize(raw, config)
    except TokenizeError as exc:
        logger.debug("%s: %s", AbsenceReason.TOKENIZE, exc)
        return None
    return parser(query)
