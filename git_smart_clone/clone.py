"""High-level orchestration for cloning a repository into its planned directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console

from . import git
from .exceptions import UserAbort
from .fs import prepare_destination
from .interactive import ConfirmOverwrite, confirm_overwrite
from .models import DestinationState, ResolvedTarget
from .planner import plan
from .resolver import resolve

logger = logging.getLogger(__name__)


@dataclass
class CloneService:
    root: str
    confirm: ConfirmOverwrite = confirm_overwrite
    git_runner: Any = git
    console: Console = field(default_factory=lambda: Console(stderr=True))

    def resolve_target(self, raw: str) -> ResolvedTarget:
        identifier = resolve(raw)
        return plan(identifier, self.root)

    def clone(self, raw: str, *, branch: str | None = None, protocol: str = "ssh") -> Path:
        """Clone ``raw`` into its destination and return that path."""

        target = self.resolve_target(raw)
        self._prepare(target)
        identifier = target.identifier
        remote = identifier.clone_url(protocol)
        self.console.print(f"Cloning {identifier.slug}…")
        logger.debug("git clone %s %s", remote, target.path)
        self.git_runner.clone(remote, target.path)
        self.console.print(f"Cloned {identifier.slug} into {target.path}")
        if branch:
            self.git_runner.checkout(target.path, branch)
            self.console.print(f"Checked out branch {branch}")
        return target.path

    def _prepare(self, target: ResolvedTarget) -> None:
        if target.state is DestinationState.ABSENT:
            self.console.print("Destination directory does not exist. Creating…")
        elif target.requires_confirmation:
            if not self.confirm(target):
                raise UserAbort(f"Left {target.path} untouched.")
            self.console.print(f"Removing existing {target.path}")
        prepare_destination(target)


__all__ = ["CloneService"]
