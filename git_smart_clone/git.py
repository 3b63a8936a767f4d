"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    stream: bool = False,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure.

    With ``stream`` set, git's own output goes straight to stderr instead of
    being captured, so stdout stays reserved for the final path.
    """

    cmd = ["git", *args]
    try:
        if stream:
            proc = subprocess.run(cmd, cwd=str(cwd), stdout=sys.stderr, text=True, check=False)
        else:
            proc = subprocess.run(cmd, cwd=str(cwd), capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise GitCommandError(cmd, 127, "git executable not found on PATH") from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def clone(remote: str, target: Path) -> None:
    run_git(["clone", remote, str(target)], cwd=Path(tempfile.gettempdir()), stream=True)


def checkout(path: Path, branch: str) -> None:
    run_git(["checkout", branch], cwd=path, stream=True)


__all__ = ["run_git", "clone", "checkout"]
