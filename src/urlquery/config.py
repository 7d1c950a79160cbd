"""Tokenizer configuration.

QueryConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

import codecs
from dataclasses import dataclass

from urlquery.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """How raw query strings are split and decoded. Immutable after creation.

    The defaults follow ``application/x-www-form-urlencoded``. Override
    what you need::

        config = QueryConfig(separator=";", max_fields=50)
    """

    # Splitting
    separator: str = "&"
    strip_fragment: bool = True  # Drop everything from the first "#"

    # Decoding
    plus_as_space: bool = True
    encoding: str = "utf-8"

    # Limits
    max_fields: int | None = None  # None = unlimited

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "QueryConfig.separator must be a non-empty string"
            raise ConfigurationError(msg)
        if self.max_fields is not None and self.max_fields < 1:
            msg = f"QueryConfig.max_fields must be at least 1, got {self.max_fields}"
            raise ConfigurationError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            msg = f"QueryConfig.encoding is not a known codec: {self.encoding!r}"
            raise ConfigurationError(msg) from None


DEFAULT_CONFIG = QueryConfig()
