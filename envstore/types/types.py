"""
define canonical types
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

# -------- Aliases (clarify intent) --------
CanonicalKey = str  # e.g. "IMAP_HOST", exactly as written in the file
DerivedAlias = str  # e.g. "imapHost"
Primitive = Union[str, int, bool, float]

# -------- Enums --------


class ValueKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"  # extended inference only
    DOUBLE = "double"  # extended inference only


class PathSource(str, Enum):
    EXPLICIT = "explicit"  # caller passed a file or directory
    ENV = "env"  # working directory taken from $PWD (or the configured variable)
    CWD = "cwd"  # process working directory


# -------- File resolution --------


@dataclass(frozen=True, slots=True)
class EnvLocation:
    path: Path  # the .env file to read
    source: PathSource
    directory: Path  # working directory the path was built from (parent for explicit paths)


# -------- Tokenizer output --------


@dataclass(frozen=True, slots=True)
class RawPair:
    """
    One KEY=VALUE line, trimmed (and unquoted when the value was in double quotes).
    """

    key: CanonicalKey
    value: str
    line: str = ""  # raw line text, kept for diagnostics
    line_number: int = 0  # 1-based; 0 when built by hand
    quoted: bool = False

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("RawPair.key must be non-empty.")
        if not self.value and not self.quoted:
            raise ValueError("RawPair.value may only be empty when quoted.")


# -------- Store values --------


@dataclass(frozen=True, slots=True)
class TypedValue:
    """
    A parsed value tagged with its kind.

    ``string_value()`` gives the canonical text form for every kind, so callers that
    only want text never need to branch on ``kind``.
    """

    kind: ValueKind
    value: Primitive

    @classmethod
    def string(cls, text: str) -> TypedValue:
        return cls(ValueKind.STRING, text)

    @classmethod
    def integer(cls, number: int) -> TypedValue:
        return cls(ValueKind.INTEGER, number)

    @classmethod
    def boolean(cls, flag: bool) -> TypedValue:
        return cls(ValueKind.BOOLEAN, flag)

    @classmethod
    def double(cls, number: float) -> TypedValue:
        return cls(ValueKind.DOUBLE, number)

    def string_value(self) -> str:
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is ValueKind.DOUBLE:
            return repr(self.value)
        return str(self.value)

    def __str__(self) -> str:
        return self.string_value()
