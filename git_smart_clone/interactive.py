"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Callable

from InquirerPy import inquirer

from .exceptions import UserAbort, ValidationError
from .models import ResolvedTarget

ConfirmOverwrite = Callable[[ResolvedTarget], bool]


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError(
            "Destination is not empty and confirmation requires a TTY. Remove it manually and retry."
        )


def confirm(message: str, default: bool = False) -> bool:
    _ensure_tty()
    try:
        return bool(inquirer.confirm(message=message, default=default).execute())
    except KeyboardInterrupt as exc:  # pragma: no cover - user cancel
        raise UserAbort("User cancelled the prompt.") from exc


def overwrite_message(target: ResolvedTarget) -> str:
    if target.occupied_by_file:
        return f"{target.path} exists and is not a directory. Delete it and clone in its place?"
    return f"{target.path} already exists and is not empty. Delete it and clone again?"


def confirm_overwrite(target: ResolvedTarget) -> bool:
    """Default overwrite capability: ask on the terminal."""

    return confirm(overwrite_message(target))


__all__ = ["ConfirmOverwrite", "confirm", "confirm_overwrite", "overwrite_message"]
