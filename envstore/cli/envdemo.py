"""envdemo CLI entrypoint.

Loads a .env file and prints the expected keys twice: once by exact key
(``IMAP_HOST``) and once by derived alias (``imapHost``). Secret-looking values are
masked.

Usage: envdemo [--path FILE_OR_DIR] [--keys KEY ...] [--extended-types]
               [--events FILE] [--debug]

Exit codes: 0 on success, 1 if the file cannot be found, read or parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys
import uuid
from pathlib import Path
from typing import Mapping, Optional, TextIO

from envstore.adapters.telemetry.jsonl import JsonlTelemetry
from envstore.config.configs import DEFAULT_EXPECTED_KEYS, LoaderConfig
from envstore.core.loader import DotenvLoader
from envstore.core.masking import display_value
from envstore.core.naming import derived_name
from envstore.errors.errors import EnvstoreError
from envstore.ports.config_provider import ConfigProvider
from envstore.ports.telemetry import Telemetry
from envstore.types.types import EnvLocation, PathSource, TypedValue

RULE = "-" * 44


def build_parser() -> argparse.ArgumentParser:
    """
    Return the CLI argument parser.
    """
    p = argparse.ArgumentParser(prog="envdemo", description="Load and display a .env file")
    p.add_argument(
        "--path",
        type=Path,
        help="A .env file, or a directory containing one. Defaults to $PWD/.env.",
    )
    p.add_argument(
        "--keys",
        nargs="+",
        default=list(DEFAULT_EXPECTED_KEYS),
        metavar="KEY",
        help="Keys to display (default: the IMAP_* demo keys)",
    )
    p.add_argument(
        "--extended-types",
        action="store_true",
        help="Also infer booleans and floats",
    )
    p.add_argument("--events", type=Path, help="Append JSONL telemetry events to this file")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p


def render_exact(store: ConfigProvider, config: LoaderConfig, keys: list[str]) -> list[str]:
    return [f"{key}: {_display(key, store.get(key), config)}" for key in keys]


def render_derived(store: ConfigProvider, config: LoaderConfig, keys: list[str]) -> list[str]:
    # labelled by canonical key, looked up by alias
    return [
        f"{key}: {_display(key, store.get_derived(derived_name(key)), config)}" for key in keys
    ]


def _display(key: str, value: TypedValue | None, config: LoaderConfig) -> str:
    return display_value(key, value, markers=config.secret_markers, mask=config.mask)


def describe_location(location: EnvLocation, config: LoaderConfig) -> str:
    if location.source is PathSource.ENV:
        return f"Current directory from {config.cwd_env_var}: {location.directory}"
    if location.source is PathSource.CWD:
        return f"Current directory from process working directory: {location.directory}"
    return f"Using explicit path: {location.path}"


def run(
    loader: DotenvLoader,
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Load, print and return the exit code."""
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    config = loader.config
    print("envdemo - loading environment variables from a .env file", file=out)
    print(RULE, file=out)

    try:
        location = loader.locate(path, environ=environ)
        print(describe_location(location, config), file=out)
        print(f"Looking for .env file at: {location.path}", file=out)
        store = loader.load_resolved(location.path)
    except EnvstoreError as exc:
        print(f"Error loading .env file: {exc}", file=err)
        return 1

    print(f"Loaded {len(store)} variable(s) from {location.path}", file=out)

    keys = list(config.expected_keys)
    print("\nLoaded environment variables (exact key):", file=out)
    print(RULE, file=out)
    for line in render_exact(store, config, keys):
        print(line, file=out)

    print("\nLoaded environment variables (derived name):", file=out)
    print(RULE, file=out)
    for line in render_derived(store, config, keys):
        print(line, file=out)

    print("\nenvdemo completed successfully", file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint wrapper compatible with setuptools scripts."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = LoaderConfig(expected_keys=tuple(args.keys), extended_types=args.extended_types)
    telemetry: Optional[Telemetry] = None
    if args.events is not None:
        telemetry = JsonlTelemetry(
            run_id=str(uuid.uuid4()),
            sink_path=args.events,
            secret_markers=config.secret_markers,
        )

    return run(DotenvLoader(config, telemetry), args.path)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
