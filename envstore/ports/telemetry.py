"""Telemetry Port Interface.

Contract: Log structured events. Implementations decide where events go (JSONL file,
in-memory list for tests, nowhere).
"""

from __future__ import annotations

from typing import Any, Protocol


class Telemetry(Protocol):
    def log(self, event: str, **fields: Any) -> None: ...


class NullTelemetry:
    """Telemetry that drops every event."""

    def log(self, event: str, **fields: Any) -> None:
        return None
