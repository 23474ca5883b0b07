from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from envstore.errors.errors import FileMissing, UnreadableFile
from envstore.types.types import EnvLocation, PathSource

_LOGGER = logging.getLogger(__name__)

DEFAULT_FILENAME = ".env"
CWD_ENV_VAR = "PWD"


def locate_env_file(
    path: str | Path | None = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    filename: str = DEFAULT_FILENAME,
    cwd_env_var: str = CWD_ENV_VAR,
) -> EnvLocation:
    """
    Work out which file to read, and where its directory came from.

    An explicit ``path`` wins; a directory gets ``filename`` appended. Otherwise the
    working directory comes from ``environ[cwd_env_var]`` (the shell's ``PWD``),
    falling back to ``Path.cwd()`` when that entry is unset or empty.
    """
    if path is not None:
        resolved = Path(path)
        if resolved.is_dir():
            resolved = resolved / filename
        location = EnvLocation(resolved, PathSource.EXPLICIT, resolved.parent)
    else:
        env = os.environ if environ is None else environ
        pwd = env.get(cwd_env_var)
        if pwd:
            base, source = Path(pwd), PathSource.ENV
        else:
            base, source = Path.cwd(), PathSource.CWD
        location = EnvLocation(base / filename, source, base)

    _LOGGER.debug(
        "dotenv_path_resolved",
        extra={
            "event": "dotenv_path_resolved",
            "path": str(location.path),
            "source": location.source.value,
        },
    )
    return location


def resolve_env_path(
    path: str | Path | None = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    filename: str = DEFAULT_FILENAME,
    cwd_env_var: str = CWD_ENV_VAR,
) -> Path:
    """Path-only form of ``locate_env_file``."""
    return locate_env_file(
        path, environ=environ, filename=filename, cwd_env_var=cwd_env_var
    ).path


def read_env_file(path: str | Path, *, encoding: str = "utf-8") -> str:
    """
    Return the decoded text of ``path``.

    Raises FileMissing if nothing exists there and UnreadableFile if it exists but
    cannot be read or decoded.
    """
    path = Path(path)
    if not path.exists():
        raise FileMissing(path)

    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise UnreadableFile(path, f"not valid {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise UnreadableFile(path, exc.strerror or exc.__class__.__name__) from exc
