"""Typed extraction of query parameters into dataclasses.

``dataclass_parser(cls)`` builds one parser per field, keyed by the
field name, and combines them with ``map_all``::

    @dataclass(frozen=True, slots=True)
    class Search:
        q: str
        page: int = 1
        tags: list[str] = field(default_factory=list)

    parse(dataclass_parser(Search), "q=cats&tag=x")  # Search(q="cats", page=1, tags=[])

Supported field types: ``str``, ``int``, ``float``, ``bool``, ``Enum``
subclasses, ``list[str]``, ``list[int]``, ``list[float]``, and any of
these ``| None``. A field whose parser yields ``None`` falls back to
its default. A required field that yields ``None`` makes the whole
result ``None``.
"""

from __future__ import annotations

import dataclasses
import enum as _enum
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from urlquery._internal.types import Parser
from urlquery.errors import ConfigurationError
from urlquery.parsers.combinators import map_all
from urlquery.parsers.primitives import custom, enum, integer, number, string, to_integer, to_number

_BOOLS: dict[str, bool] = {
    "true": True,
    "1": True,
    "yes": True,
    "on": True,
    "false": False,
    "0": False,
    "no": False,
    "off": False,
}

# Per-value converters for list fields. Values that fail are dropped.
_LIST_ITEMS: dict[type, Any] = {
    str: lambda v: v,
    int: to_integer,
    float: to_number,
}


def dataclass_parser[T](cls: type[T]) -> Parser[T | None]:
    """Build a parser that populates a *cls* instance from the query.

    Field types are checked here, once, so a bad annotation fails at
    startup rather than on the first request.

    Raises:
        ConfigurationError: *cls* is not a dataclass, or a field has an
            unsupported type.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        msg = f"dataclass_parser() expects a dataclass type, got {cls!r}"
        raise ConfigurationError(msg)

    hints = get_type_hints(cls)
    fields = [f for f in dataclasses.fields(cls) if f.init]
    parsers = [_field_parser(cls, f.name, hints[f.name]) for f in fields]

    def build(*values: Any) -> T | None:
        kwargs: dict[str, Any] = {}
        for f, value in zip(fields, values, strict=True):
            if value is not None:
                kwargs[f.name] = value
            elif not _has_default(f):
                return None
        return cls(**kwargs)

    return map_all(build, *parsers)


def _field_parser(cls: type, name: str, annotation: Any) -> Parser[Any]:
    """Pick the primitive parser for one field annotation."""
    target = _strip_optional(annotation)

    if target is str:
        return string(name)
    if target is bool:
        return enum(name, _BOOLS)
    if target is int:
        return integer(name)
    if target is float:
        return number(name)
    if isinstance(target, type) and issubclass(target, _enum.Enum):
        return enum(name, {str(member.value): member for member in target})

    if get_origin(target) is list:
        (item_type,) = get_args(target)
        convert = _LIST_ITEMS.get(item_type)
        if convert is not None:
            return custom(name, lambda values: _convert_all(convert, values))

    msg = f"{cls.__name__}.{name}: unsupported field type {annotation!r}"
    raise ConfigurationError(msg)


def _convert_all(convert: Any, values: list[str]) -> list[Any]:
    converted = (convert(value) for value in values)
    return [value for value in converted if value is not None]


def _strip_optional(annotation: Any) -> Any:
    """Return ``X`` for ``X | None``; leave anything else alone."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _has_default(f: dataclasses.Field[Any]) -> bool:
    return f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING
