"""
Type inference for raw .env values.

Default inference only recognises base-10 signed 64-bit integers in canonical form
(no "+", no redundant leading zeros, no "-0"), so ``string_value()`` always gives
back the exact text that was written. Anything else stays a string. Inference
never raises.

Extended inference additionally recognises booleans (``true``/``false``, any case)
and finite decimal floats.
"""

from __future__ import annotations

import math
import re

from envstore.types.types import TypedValue

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"-?(0|[1-9][0-9]*)")
_DOUBLE_RE = re.compile(r"-?[0-9]+(\.[0-9]+([eE][-+]?[0-9]+)?|[eE][-+]?[0-9]+)")
_BOOLEANS = {"true": True, "false": False}


def infer(raw: str, *, extended_types: bool = False) -> TypedValue:
    """Classify ``raw``, the value text after trimming and unquoting."""
    number = parse_int64(raw)
    if number is not None:
        return TypedValue.integer(number)

    if extended_types:
        flag = _BOOLEANS.get(raw.lower())
        if flag is not None:
            return TypedValue.boolean(flag)
        real = _parse_double(raw)
        if real is not None:
            return TypedValue.double(real)

    return TypedValue.string(raw)


def parse_int64(raw: str) -> int | None:
    if _INTEGER_RE.fullmatch(raw) is None or raw == "-0":
        return None
    number = int(raw)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def _parse_double(raw: str) -> float | None:
    if _DOUBLE_RE.fullmatch(raw) is None:
        return None
    real = float(raw)
    # 1e999 overflows to inf
    if not math.isfinite(real):
        return None
    return real
