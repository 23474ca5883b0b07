"""
Custom exceptions for envstore.

Exception hierarchy:
- EnvstoreError (base)
  - SourceError: the .env file could not be obtained
    - FileMissing: nothing exists at the resolved path
    - UnreadableFile: the path exists but cannot be read or decoded
  - ParseError: the file text is not a valid .env document
    - MalformedLine: a non-blank, non-comment line without "="
    - EmptyPair: empty key, or empty unquoted value
  - StoreStateError: store used outside its Unbuilt -> Built lifecycle
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class EnvstoreError(Exception):
    """Base exception for all envstore errors."""

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.component = component
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.component:
            parts.append(f"[component={self.component}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


# --- Source (file I/O) ---


class SourceError(EnvstoreError):
    """Raised when the .env file cannot be obtained from disk."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Path] = None,
        component: Optional[str] = "file_source",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.path = path
        details = details or {}
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, component=component, details=details)


class FileMissing(SourceError):
    """Raised when no file exists at the resolved path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No .env file at {path}", path=path)


class UnreadableFile(SourceError):
    """Raised when the file exists but cannot be read (permissions, encoding)."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(
            f"Cannot read .env file at {path}: {reason}",
            path=path,
            details={"reason": reason},
        )


# --- Parse ---


class ParseError(EnvstoreError):
    """Raised when a line of the .env text is invalid. Carries the raw line."""

    def __init__(
        self,
        message: str,
        *,
        line: str,
        line_number: int,
        component: Optional[str] = "tokenizer",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        details = details or {}
        details["line_number"] = line_number
        super().__init__(message, component=component, details=details)


class MalformedLine(ParseError):
    """Raised for a non-blank, non-comment line that has no '=' separator."""

    def __init__(self, line: str, line_number: int) -> None:
        super().__init__(
            f"Line {line_number} is not KEY=VALUE: {line!r}",
            line=line,
            line_number=line_number,
        )


class EmptyPair(ParseError):
    """Raised when the key, or an unquoted value, is empty after trimming."""

    def __init__(self, line: str, line_number: int, part: str) -> None:
        self.part = part
        super().__init__(
            f"Line {line_number} has an empty {part}: {line!r}",
            line=line,
            line_number=line_number,
            details={"part": part},
        )


# --- Store ---


class StoreStateError(EnvstoreError):
    """Raised when an EnvironmentStore is read before build or built twice."""

    def __init__(self, message: str) -> None:
        super().__init__(message, component="store")
