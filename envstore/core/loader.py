"""
Purpose:
    - Resolve and read a .env file (via the file source adapter)
    - Tokenize and build an EnvironmentStore
    - Report each stage through the Telemetry port

The loader holds no parsed state: every ``load`` call returns a new, independent
store owned by the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from envstore.adapters.file_source import locate_env_file, read_env_file
from envstore.config.configs import LoaderConfig
from envstore.core.store import EnvironmentStore
from envstore.core.tokenizer import tokenize
from envstore.errors.errors import EnvstoreError
from envstore.ports.telemetry import NullTelemetry, Telemetry
from envstore.types.types import EnvLocation


class DotenvLoader:
    """
    Dotenv-loader; loading a .env file into a typed store.
    """

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        telemetry: Optional[Telemetry] = None,
    ) -> None:
        self.config = config or LoaderConfig()
        self.telemetry: Telemetry = telemetry or NullTelemetry()

    def locate(
        self,
        path: str | Path | None = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> EnvLocation:
        location = locate_env_file(
            path,
            environ=environ,
            filename=self.config.filename,
            cwd_env_var=self.config.cwd_env_var,
        )
        self.telemetry.log(
            "dotenv_resolved", path=str(location.path), source=location.source.value
        )
        return location

    def resolve(
        self,
        path: str | Path | None = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Path:
        return self.locate(path, environ=environ).path

    def load(
        self,
        path: str | Path | None = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> EnvironmentStore:
        """
        1. Resolve the file path (explicit, else $PWD / cwd + filename)
        2. Read the text (FileMissing / UnreadableFile on failure)
        3. Tokenize and build (MalformedLine / EmptyPair on failure)
        """
        return self.load_resolved(self.resolve(path, environ=environ))

    def load_resolved(self, resolved: Path) -> EnvironmentStore:
        """Steps 2-3 of ``load`` for a path that ``resolve`` already produced."""
        try:
            text = read_env_file(resolved, encoding=self.config.encoding)
            store = self._parse(text)
        except EnvstoreError as exc:
            self._log_failure(exc, resolved)
            raise

        self.telemetry.log("dotenv_loaded", path=str(resolved), keys_total=len(store))
        return store

    def loads(self, text: str) -> EnvironmentStore:
        """Parse already-read .env text; no file system access."""
        try:
            store = self._parse(text)
        except EnvstoreError as exc:
            self._log_failure(exc, None)
            raise

        self.telemetry.log("dotenv_loaded", path=None, keys_total=len(store))
        return store

    def _parse(self, text: str) -> EnvironmentStore:
        pairs = tokenize(text)
        return EnvironmentStore(extended_types=self.config.extended_types).build(pairs)

    def _log_failure(self, exc: EnvstoreError, path: Optional[Path]) -> None:
        self.telemetry.log(
            "dotenv_load_failed",
            path=None if path is None else str(path),
            error_type=exc.__class__.__name__,
            detail=exc.details,
        )
