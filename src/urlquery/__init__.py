"""urlquery — typed parsers for the query part of a URL.

Build a parser once from small primitives, run it on every request::

    from urlquery import integer, map2, parse, string

    listing = map2(
        lambda q, page: (q or "", page or 1),
        string("q"),
        integer("page"),
    )

    parse(listing, "?q=cats&page=2")   # ("cats", 2)
    parse(listing, "?page=2&page=3")   # ("", 1)

Parsers never raise on bad query data; a value that is missing,
repeated, or unconvertible comes back as ``None``.

Dataclass binding::

    from urlquery import dataclass_parser
    search = dataclass_parser(SearchParams)
    params = parse(search, request_query)
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "AbsenceReason",
    "ConfigurationError",
    "Parser",
    "QueryConfig",
    "QueryMapping",
    "Reducer",
    "TokenizeError",
    "UrlQueryError",
    "custom",
    "dataclass_parser",
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
    "tokenize",
]

# Public name -> module that defines (or re-exports) it
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "urlquery.config",
    "QueryConfig": "urlquery.config",
    "AbsenceReason": "urlquery.errors",
    "ConfigurationError": "urlquery.errors",
    "TokenizeError": "urlquery.errors",
    "UrlQueryError": "urlquery.errors",
    "QueryMapping": "urlquery.query",
    "tokenize": "urlquery.tokenizer",
    "dataclass_parser": "urlquery.extraction",
    "Parser": "urlquery.parsers",
    "Reducer": "urlquery.parsers",
    "custom": "urlquery.parsers",
    "enum": "urlquery.parsers",
    "integer": "urlquery.parsers",
    "map": "urlquery.parsers",
    "map2": "urlquery.parsers",
    "map3": "urlquery.parsers",
    "map_all": "urlquery.parsers",
    "number": "urlquery.parsers",
    "parse": "urlquery.parsers",
    "string": "urlquery.parsers",
    "succeed": "urlquery.parsers",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlquery`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
