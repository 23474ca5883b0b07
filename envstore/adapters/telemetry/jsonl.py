"""JSON Lines Telemetry adapter.

Implements the Telemetry port by appending one JSON object per event to a file.
Field names are checked with the same secret markers the console masking uses
(``LoaderConfig.secret_markers``); matching fields are redacted before anything
touches disk.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import orjson

from envstore.core.masking import DEFAULT_SECRET_MARKERS, is_secret

REDACTED = "***REDACTED***"


class JsonlTelemetry:
    def __init__(
        self,
        run_id: str,
        sink_path: Path,
        secret_markers: Iterable[str] = DEFAULT_SECRET_MARKERS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._run_id = str(run_id)
        self._sink_path = sink_path if isinstance(sink_path, Path) else Path(sink_path)
        self._secret_markers = tuple(secret_markers)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def log(self, event: str, **fields: Any) -> None:
        if not event:
            raise ValueError("Telemetry event name must be non-empty")

        record: dict[str, Any] = {
            "event": event,
            "ts_utc": self._clock().isoformat(),
            "run_id": self._run_id,
        }
        redacted: list[str] = []
        for key, value in fields.items():
            if is_secret(key, self._secret_markers):
                record[key] = REDACTED
                redacted.append(key)
            else:
                record[key] = value
        if redacted:
            record["redacted_fields"] = sorted(redacted)

        self._write_record(record)

    def _write_record(self, record: Mapping[str, Any]) -> None:
        payload = orjson.dumps(record, default=str, option=orjson.OPT_SORT_KEYS)
        self._sink_path.parent.mkdir(parents=True, exist_ok=True)
        with self._sink_path.open("ab") as handle:
            handle.write(payload + b"\n")
