"""Raw query string -> ``QueryMapping``.

Splits on the configured separator, then on the first ``=`` of each
segment, and percent-decodes both halves with ``urllib.parse``.
Malformed entries are dropped one at a time; the rest of the query
still parses. Only unusable input raises ``TokenizeError``.
"""

import logging
import re
from urllib.parse import unquote, unquote_plus

from urlquery.config import DEFAULT_CONFIG, QueryConfig
from urlquery.errors import TokenizeError
from urlquery.query import QueryMapping

logger = logging.getLogger("urlquery.tokenizer")

# A "%" that does not start a two-hex-digit escape
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def tokenize(raw: str | bytes, config: QueryConfig = DEFAULT_CONFIG) -> QueryMapping:
    """Turn a raw query string into a ``QueryMapping``.

    Accepts the query with or without its leading ``?``. A trailing
    ``#fragment`` is ignored. Bytes, the form an ASGI server hands over,
    are read with ``config.encoding``, so raw ``b"q=caf\\xc3\\xa9"`` and
    ``"q=caf%C3%A9"`` both give ``café``. An entry holding bytes that are
    not valid in that encoding is dropped.

    Example::

        tokenize("?tag=py&tag=rs&page=2#top")
        # QueryMapping({'tag': ['py', 'rs'], 'page': ['2']})

    Raises:
        TokenizeError: *raw* is not ``str``/``bytes``, or the query has
            more than ``config.max_fields`` segments.
    """
    if isinstance(raw, bytes):
        raw = raw.decode(config.encoding, errors="surrogateescape")
    elif not isinstance(raw, str):
        msg = f"Cannot tokenize {type(raw).__name__!r}, expected str or bytes"
        raise TokenizeError(msg)

    if config.strip_fragment:
        raw = raw.partition("#")[0]
    raw = raw.removeprefix("?")

    segments = [segment for segment in raw.split(config.separator) if segment]
    if config.max_fields is not None and len(segments) > config.max_fields:
        msg = f"Query has {len(segments)} fields, limit is {config.max_fields}"
        raise TokenizeError(msg)

    pairs: list[tuple[str, str]] = []
    for segment in segments:
        raw_key, _, raw_value = segment.partition("=")
        key = _decode(raw_key, config)
        value = _decode(raw_value, config)
        if key is None or value is None:
            logger.debug("Dropped malformed query entry %r", segment)
            continue
        if not key:
            logger.debug("Dropped query entry with empty name %r", segment)
            continue
        pairs.append((key, value))

    return QueryMapping.from_pairs(pairs)


def _decode(text: str, config: QueryConfig) -> str | None:
    """Percent-decode *text*, or return None if it is not valid in the configured encoding."""
    if _BAD_ESCAPE_RE.search(text):
        return None
    unquote_fn = unquote_plus if config.plus_as_space else unquote
    try:
        decoded = unquote_fn(text, encoding=config.encoding, errors="strict")
        # Undecodable raw bytes survive as lone surrogates, which UTF-8 rejects
        decoded.encode("utf-8")
    except UnicodeError:
        return None
    return decoded
