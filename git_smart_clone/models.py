"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

GITHUB_HOST = "github.com"


@dataclass(frozen=True)
class RepositoryIdentifier:
    """Canonical owner/repo pair on the supported host."""

    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def clone_url(self, protocol: str = "ssh") -> str:
        if protocol == "https":
            return f"https://{GITHUB_HOST}/{self.owner}/{self.repo}.git"
        if protocol == "ssh":
            return f"git@{GITHUB_HOST}:{self.owner}/{self.repo}.git"
        raise ValueError(f"Unknown clone protocol: {protocol}")


class DestinationState(Enum):
    """What occupied the destination path when it was inspected."""

    ABSENT = "absent"
    EXISTING_EMPTY = "existing-empty"
    EXISTING_NON_EMPTY = "existing-non-empty"


@dataclass(frozen=True)
class ResolvedTarget:
    """Identifier plus the absolute directory it will be cloned into."""

    identifier: RepositoryIdentifier
    path: Path
    state: DestinationState
    occupied_by_file: bool = False

    @property
    def requires_confirmation(self) -> bool:
        return self.state is DestinationState.EXISTING_NON_EMPTY
