"""Primitive query parsers.

Each primitive binds to one parameter name and reduces that name's
values to a typed result. ``custom`` is the general form; the others
are ``custom`` with an exactly-one policy::

    page = integer("page")
    # ?page=2        == 2
    # ?page=17.1     == 17
    # ?page=two      == None
    # ?sort=date     == None
    # ?page=2&page=3 == None

A primitive never raises for bad query data. Every failure is ``None``.
"""

import logging
import math
import re
from collections.abc import Mapping

from urlquery._internal.multimap import MultiValueMapping
from urlquery._internal.types import Parser, Reducer
from urlquery.errors import AbsenceReason

logger = logging.getLogger("urlquery.parsers")

# Optional sign, digits, optional fraction. The fraction is truncated away.
_INTEGER_RE = re.compile(r"[+-]?\d+(?:\.\d*)?", re.ASCII)

# Decimal float literal: no whitespace, underscores, nan or inf
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def custom[A](key: str, reducer: Reducer[A]) -> Parser[A]:
    """Run *reducer* over every value of *key*.

    A missing key gives the reducer an empty list. The reducer alone
    decides what several values, or none, mean. Handle ``?post=2&post=7``::

        posts = custom("post", lambda values: [int(v) for v in values if v.isdigit()])
        # ?post=2&post=7 == [2, 7]
        # ?post=2&post=x == [2]
        # ?hats=2        == []
    """

    def parser(query: MultiValueMapping) -> A:
        return reducer(query.get_list(key))

    return parser


def _single(key: str, values: list[str]) -> str | None:
    """Return the only value in *values*, or None if there isn't exactly one."""
    if len(values) == 1:
        return values[0]
    reason = AbsenceReason.KEY_ABSENT if not values else AbsenceReason.MULTIPLICITY
    logger.debug("%s: %s (%d values)", key, reason, len(values))
    return None


def string(key: str) -> Parser[str | None]:
    """Return the decoded value of *key* when it occurs exactly once.

    ::

        search = string("search")
        # ?search=cats             == "cats"
        # ?search=42               == "42"
        # ?branch=left             == None
        # ?search=cats&search=dogs == None
    """
    return custom(key, lambda values: _single(key, values))


def to_integer(value: str) -> int | None:
    """Convert *value* to an int, truncating toward zero. None if it isn't one."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        return int(value.partition(".")[0])
    except ValueError:
        # More digits than sys.get_int_max_str_digits() allows
        return None


def to_number(value: str) -> float | None:
    """Convert *value* to a finite float. None if it isn't one."""
    if not _NUMBER_RE.fullmatch(value):
        return None
    result = float(value)
    # Overflowed exponent, e.g. "1e999"
    if math.isinf(result):
        return None
    return result


def integer(key: str) -> Parser[int | None]:
    """Parse *key* as a base-10 integer, truncating any fraction toward zero."""

    def reduce(values: list[str]) -> int | None:
        value = _single(key, values)
        if value is None:
            return None
        result = to_integer(value)
        if result is None:
            logger.debug("%s: %s (%r is not an integer)", key, AbsenceReason.CONVERSION, value)
        return result

    return custom(key, reduce)


def number(key: str) -> Parser[float | None]:
    """Parse *key* as a decimal float.

    ::

        scale = number("scale")
        # ?scale=2                == 2.0
        # ?scale=17.12            == 17.12
        # ?scale=two              == None
        # ?scale=2.12&scale=3.123 == None
    """

    def reduce(values: list[str]) -> float | None:
        value = _single(key, values)
        if value is None:
            return None
        result = to_number(value)
        if result is None:
            logger.debug("%s: %s (%r is not a number)", key, AbsenceReason.CONVERSION, value)
        return result

    return custom(key, reduce)


def enum[A](key: str, table: Mapping[str, A]) -> Parser[A | None]:
    """Look the single value of *key* up in *table*.

    Maybe you want a true-or-false parameter::

        debug = enum("debug", {"true": True, "false": False})
        # ?debug=true            == True
        # ?debug=false           == False
        # ?debug=1               == None
        # ?true=true             == None
        # ?debug=true&debug=true == None
    """
    entries = dict(table)

    def reduce(values: list[str]) -> A | None:
        value = _single(key, values)
        if value is None:
            return None
        if value not in entries:
            logger.debug("%s: %s (%r)", key, AbsenceReason.ENUM_MISMATCH, value)
            return None
        return entries[value]

    return custom(key, reduce)
