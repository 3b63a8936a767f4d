"""Filesystem helpers for git-smart-clone."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .exceptions import FilesystemError
from .models import DestinationState, ResolvedTarget

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(path, exc) from exc


def remove_entry(path: Path) -> None:
    """Delete whatever occupies ``path``: a directory tree, a file or a symlink."""

    try:
        if path.is_symlink() or not path.is_dir():
            logger.warning("%s is not a directory; removing the file in its place", path)
            path.unlink()
        else:
            shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise FilesystemError(path, exc) from exc


def prepare_destination(target: ResolvedTarget) -> None:
    """Leave an empty directory at ``target.path``.

    Callers must have obtained an overwrite decision for targets that
    require confirmation.
    """

    if target.state is DestinationState.EXISTING_EMPTY:
        return
    if target.state is DestinationState.EXISTING_NON_EMPTY:
        remove_entry(target.path)
    ensure_directory(target.path)


__all__ = ["ensure_directory", "remove_entry", "prepare_destination"]
