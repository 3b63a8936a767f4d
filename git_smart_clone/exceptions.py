"""Custom exception hierarchy for git-smart-clone."""

from __future__ import annotations

from pathlib import Path


class CloneError(RuntimeError):
    """Base error for all custom exceptions."""


class ParseError(CloneError):
    """Raised when a repository reference cannot be parsed."""

    reason = "cannot parse repository reference"

    def __init__(self, raw: str, detail: str | None = None):
        self.raw = raw
        message = f"Invalid repository reference {raw!r}: {self.reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MissingOwnerOrRepoError(ParseError):
    """Raised when fewer than two path segments remain after normalization."""

    reason = "expected <owner>/<repo>"


class EmptySegmentError(ParseError):
    """Raised when the owner or repository name is empty."""

    reason = "owner and repository name must not be empty"


class InvalidSegmentError(ParseError):
    """Raised when the owner or repository name contains whitespace."""

    reason = "owner and repository name must not contain whitespace"


class UnsupportedHostError(ParseError):
    """Raised when a URL points at a host other than github.com."""

    reason = "unsupported host"


class PlannerError(CloneError):
    """Raised when a destination cannot be planned."""


class NoRootConfiguredError(PlannerError):
    """Raised when the planner receives an empty root directory."""

    def __init__(self) -> None:
        super().__init__("No root directory configured for cloned repositories.")


class FilesystemError(CloneError):
    """Raised when inspecting or preparing a destination fails."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        detail = error.strerror or str(error)
        super().__init__(f"Filesystem error at {path}: {detail}")


class MissingEnvError(CloneError):
    """Raised when the required environment variables are absent or invalid."""


class GitCommandError(CloneError):
    """Raised when a git invocation fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        message = "Git command failed"
        if command:
            message = f"Git command failed (exit {returncode}): {' '.join(command)}"
        if stderr and stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""


class ValidationError(CloneError):
    """Raised when user input is invalid."""


class UserAbort(CloneError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "CloneError",
    "ParseError",
    "MissingOwnerOrRepoError",
    "EmptySegmentError",
    "InvalidSegmentError",
    "UnsupportedHostError",
    "PlannerError",
    "NoRootConfiguredError",
    "FilesystemError",
    "MissingEnvError",
    "GitCommandError",
    "ValidationError",
    "UserAbort",
]
