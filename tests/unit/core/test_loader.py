from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from envstore.config.configs import LoaderConfig
from envstore.core.loader import DotenvLoader
from envstore.errors.errors import FileMissing, MalformedLine
from envstore.types.types import TypedValue


@dataclass
class StubTelemetry:
    events: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)

    def log(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]


def _write_env(directory: Path, text: str, name: str = ".env") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_explicit_file(tmp_path: Path) -> None:
    env_file = _write_env(tmp_path, "IMAP_HOST=localhost\nIMAP_PORT=993\n")
    telemetry = StubTelemetry()

    store = DotenvLoader(telemetry=telemetry).load(env_file)

    assert store.get("IMAP_PORT") == TypedValue.integer(993)
    assert telemetry.names() == ["dotenv_resolved", "dotenv_loaded"]
    assert telemetry.events[-1][1] == {"path": str(env_file), "keys_total": 2}


def test_load_from_pwd(tmp_path: Path) -> None:
    _write_env(tmp_path, "IMAP_HOST=from-pwd\n")

    store = DotenvLoader().load(environ={"PWD": str(tmp_path)})

    assert store.get_derived("imapHost") == TypedValue.string("from-pwd")


def test_load_uses_configured_filename(tmp_path: Path) -> None:
    _write_env(tmp_path, "A=1\n", name=".env.local")
    loader = DotenvLoader(LoaderConfig(filename=".env.local"))

    store = loader.load(tmp_path)

    assert store.get("A") == TypedValue.integer(1)


def test_load_missing_file_is_reported(tmp_path: Path) -> None:
    telemetry = StubTelemetry()

    with pytest.raises(FileMissing):
        DotenvLoader(telemetry=telemetry).load(environ={"PWD": str(tmp_path)})

    name, fields = telemetry.events[-1]
    assert name == "dotenv_load_failed"
    assert fields["error_type"] == "FileMissing"


def test_load_parse_error_is_reported(tmp_path: Path) -> None:
    env_file = _write_env(tmp_path, "A=1\nNOKEYVALUE\n")
    telemetry = StubTelemetry()

    with pytest.raises(MalformedLine) as exc_info:
        DotenvLoader(telemetry=telemetry).load(env_file)

    assert exc_info.value.line == "NOKEYVALUE"
    assert telemetry.events[-1][1]["detail"] == {"line_number": 2}


def test_loads_skips_file_system() -> None:
    loader = DotenvLoader(LoaderConfig(extended_types=True))

    store = loader.loads("FLAG=false\n")

    assert store.get("FLAG") == TypedValue.boolean(False)


def test_each_load_returns_new_store(tmp_path: Path) -> None:
    env_file = _write_env(tmp_path, "A=1\n")
    loader = DotenvLoader()

    assert loader.load(env_file) is not loader.load(env_file)
