"""Derived (lowerCamelCase) aliases for canonical UPPER_SNAKE_CASE keys."""

from __future__ import annotations

from envstore.types.types import CanonicalKey, DerivedAlias

SEGMENT_SEPARATOR = "_"


def derived_name(key: CanonicalKey) -> DerivedAlias:
    """
    IMAP_HOST -> imapHost, DB_URL_2 -> dbUrl2.

    Empty segments (leading, trailing or doubled underscores) are dropped.
    """
    segments = [segment for segment in key.split(SEGMENT_SEPARATOR) if segment]
    if not segments:
        return ""
    head, *tail = segments
    return head.lower() + "".join(segment[0].upper() + segment[1:].lower() for segment in tail)
