"""Resolve the clone root from environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .exceptions import MissingEnvError

ROOT_ENV_VARS = ("GC_DOWNLOAD_PATH", "GOPATH")
SOURCE_SUBDIR = "src"


def resolve_root(environ: Mapping[str, str] | None = None) -> str:
    """Return ``<first set variable>/src``, checking that it is an existing directory."""

    environ = os.environ if environ is None else environ
    base = _first_set(environ)
    root = Path(base).expanduser() / SOURCE_SUBDIR
    if not root.exists():
        raise MissingEnvError(
            f"Root directory {root} does not exist. Create it or point {ROOT_ENV_VARS[0]} elsewhere."
        )
    if not root.is_dir():
        raise MissingEnvError(f"Root path {root} is not a directory.")
    return str(root)


def _first_set(environ: Mapping[str, str]) -> str:
    for var in ROOT_ENV_VARS:
        raw = environ.get(var)
        if raw:
            return raw
    primary, fallback = ROOT_ENV_VARS
    raise MissingEnvError(
        f"Environment variable {primary} or {fallback} is required. "
        f"Example: export {primary}=$HOME/code"
    )


__all__ = ["ROOT_ENV_VARS", "resolve_root"]
