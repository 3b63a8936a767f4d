"""Turn human-typed repository references into a canonical owner/repo pair.

Every accepted shape is reduced to a host and a ``/``-separated path before
the owner and repository are read off it::

    git@github.com:acme/widget.git           -> github.com  acme/widget.git
    https://github.com/acme/widget/tree/dev  -> github.com  acme/widget/tree/dev
    github.com/acme/widget                   -> github.com/acme/widget
    acme/widget                              -> acme/widget

A leading ``github.com`` segment is always treated as the host, never as an
owner. Anything after the repository segment is ignored, including
``tree/<branch>``; branches are only selected explicitly.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .exceptions import (
    EmptySegmentError,
    InvalidSegmentError,
    MissingOwnerOrRepoError,
    UnsupportedHostError,
)
from .models import GITHUB_HOST, RepositoryIdentifier

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_SSH_RE = re.compile(r"^git@(?P<host>[^/:]+)(?:[:/](?P<path>.*))?$")
_SSH_USER = "git@"
_GIT_SUFFIX = ".git"
_RESERVED_NAMES = {".", ".."}


def resolve(raw: str) -> RepositoryIdentifier:
    """Parse ``raw`` into a :class:`RepositoryIdentifier` or raise a ParseError."""

    text = raw.strip()
    host, path = _split_host(text)
    segments = [segment for segment in path.split("/") if segment]
    if host is None:
        if segments and segments[0] == GITHUB_HOST:
            segments = segments[1:]
    elif not host and not segments:
        raise MissingOwnerOrRepoError(raw)
    elif host != GITHUB_HOST:
        raise UnsupportedHostError(raw, host or None)
    if len(segments) < 2:
        raise MissingOwnerOrRepoError(raw)
    owner, repo = segments[0], _strip_git_suffix(segments[1])
    for value in (owner, repo):
        if not value:
            raise EmptySegmentError(raw)
        if any(char.isspace() for char in value):
            raise InvalidSegmentError(raw, value)
        if value in _RESERVED_NAMES:
            raise InvalidSegmentError(raw, f"{value!r} is not a valid name")
    return RepositoryIdentifier(owner=owner, repo=repo)


def _split_host(text: str) -> tuple[str | None, str]:
    """Return ``(host, path)``; host is None when the input names no host explicitly."""

    if _SCHEME_RE.match(text):
        parts = urlsplit(text)
        return (parts.hostname or "").lower(), parts.path
    if text.startswith(_SSH_USER):
        match = _SSH_RE.match(text)
        if not match:
            return "", ""
        return match.group("host").lower(), match.group("path") or ""
    return None, re.split(r"[?#]", text, maxsplit=1)[0]


def _strip_git_suffix(name: str) -> str:
    if name.endswith(_GIT_SUFFIX):
        return name[: -len(_GIT_SUFFIX)]
    return name


__all__ = ["resolve"]
