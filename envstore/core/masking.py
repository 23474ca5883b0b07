"""
Display masking for secret-looking keys.

Presentation policy only: the store keeps clear-text values, callers that print
values run them through ``display_value`` first.
"""

from __future__ import annotations

from typing import Iterable

from envstore.types.types import TypedValue

MASK = "********"
DEFAULT_SECRET_MARKERS: tuple[str, ...] = ("PASSWORD", "SECRET", "TOKEN", "API_KEY")


def is_secret(key: str, markers: Iterable[str] = DEFAULT_SECRET_MARKERS) -> bool:
    upper = key.upper()
    return any(marker.upper() in upper for marker in markers)


def display_value(
    key: str,
    value: TypedValue | None,
    *,
    markers: Iterable[str] = DEFAULT_SECRET_MARKERS,
    mask: str = MASK,
    missing: str = "Not found",
) -> str:
    if value is None:
        return missing
    if is_secret(key, markers):
        return mask
    return value.string_value()
