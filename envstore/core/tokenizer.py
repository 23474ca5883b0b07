"""
Purpose:
    - Split .env text into RawPair records, one per KEY=VALUE line
    - Skip blank lines and full-line comments
    - Fail fast on the first malformed or empty line (no partial result)

Supported grammar is deliberately small: no interpolation, no multi-line values,
no ``export`` prefix and no single quotes. Double quotes are the only way to keep
surrounding whitespace or to write an empty value (``KEY=""``).
"""

from __future__ import annotations

import logging
import re

from envstore.errors.errors import EmptyPair, MalformedLine
from envstore.types.types import RawPair

_LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
SEPARATOR = "="
QUOTE = '"'
_BOM = "\ufeff"
# only CR, LF and CRLF end a line (not U+2028, \f, \v, ...)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def tokenize(text: str) -> list[RawPair]:
    """
    Return the pairs of ``text`` in file order. Duplicate keys are all kept;
    resolving them is the store's job.

    Raises MalformedLine or EmptyPair for the first invalid line.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    pairs: list[RawPair] = []
    for line_number, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        pairs.append(_tokenize_line(line, line_number))

    _LOGGER.debug(
        "dotenv_tokenized",
        extra={"event": "dotenv_tokenized", "pairs_total": len(pairs)},
    )
    return pairs


def _tokenize_line(line: str, line_number: int) -> RawPair:
    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        raise MalformedLine(line, line_number)

    key = key.strip()
    if not key:
        raise EmptyPair(line, line_number, "key")

    value, quoted = _unquote(value.strip())
    if not value and not quoted:
        raise EmptyPair(line, line_number, "value")

    return RawPair(key=key, value=value, line=line, line_number=line_number, quoted=quoted)


def _unquote(value: str) -> tuple[str, bool]:
    # a lone '"' is one character, so it stays an unquoted value
    if len(value) >= 2 and value[0] == QUOTE and value[-1] == QUOTE:
        return value[1:-1], True
    return value, False
