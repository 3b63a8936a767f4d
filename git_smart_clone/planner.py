"""Compute clone destinations and classify what currently sits there."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .exceptions import FilesystemError, NoRootConfiguredError
from .models import GITHUB_HOST, DestinationState, RepositoryIdentifier, ResolvedTarget

logger = logging.getLogger(__name__)


def destination_path(identifier: RepositoryIdentifier, root: str) -> Path:
    if not root:
        raise NoRootConfiguredError()
    base = Path(root).expanduser().absolute()
    return base / GITHUB_HOST / identifier.owner / identifier.repo


def plan(identifier: RepositoryIdentifier, root: str) -> ResolvedTarget:
    """Return the destination for ``identifier`` under ``root`` without touching disk."""

    path = destination_path(identifier, root)
    state, occupied_by_file = inspect_destination(path)
    logger.debug("Planned %s -> %s (%s)", identifier.slug, path, state.value)
    return ResolvedTarget(
        identifier=identifier,
        path=path,
        state=state,
        occupied_by_file=occupied_by_file,
    )


def inspect_destination(path: Path) -> tuple[DestinationState, bool]:
    """Classify ``path``; the flag is true when a non-directory entry occupies it."""

    try:
        info = path.lstat()
    except FileNotFoundError:
        return DestinationState.ABSENT, False
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
    if not stat.S_ISDIR(info.st_mode):
        return DestinationState.EXISTING_NON_EMPTY, True
    try:
        first = next(iter(path.iterdir()), None)
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
    if first is None:
        return DestinationState.EXISTING_EMPTY, False
    return DestinationState.EXISTING_NON_EMPTY, False


__all__ = ["destination_path", "plan", "inspect_destination"]
