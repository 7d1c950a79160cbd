"""urlquery exception hierarchy and absence reasons.

Parsers never raise for bad query data. They return ``None`` instead.
Exceptions are reserved for input that cannot be tokenized at all and
for mistakes made while *building* parsers or configs.
"""

from enum import StrEnum


class UrlQueryError(Exception):
    """Base for all urlquery-specific errors."""


class ConfigurationError(UrlQueryError):
    """Raised when a config or parser definition is invalid.

    Surfaces at build time, typically at import or startup, never while
    a parser runs against a query.
    """


class TokenizeError(UrlQueryError, ValueError):
    """Raised when a raw query cannot be tokenized.

    Rare: malformed entries are dropped one at a time. This covers input
    that is not a string at all, or a query exceeding ``max_fields``.
    ``parse()`` turns it into ``None``.
    """


class AbsenceReason(StrEnum):
    """Why a primitive parser produced ``None``.

    Diagnostic only: reasons are logged, never returned.
    """

    KEY_ABSENT = "key absent"
    MULTIPLICITY = "repeated key"
    CONVERSION = "conversion failed"
    ENUM_MISMATCH = "not an enum entry"
    TOKENIZE = "tokenize failed"
