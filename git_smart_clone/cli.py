"""Typer-based CLI for git-smart-clone."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .clone import CloneService
from .config import resolve_root
from .exceptions import CloneError

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-smart-clone {__version__}")
        raise typer.Exit()


@app.command()
def main(
    repository: str = typer.Argument(
        ...,
        help="Repository to clone: git@github.com:owner/repo.git, a github.com URL, or owner/repo.",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to check out after cloning. Branches in the URL are ignored.",
    ),
    https: bool = typer.Option(False, "--https", help="Clone over HTTPS instead of SSH."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show additional debug information."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-smart-clone version and exit.",
    ),
) -> None:
    """Clone a GitHub repository into $GC_DOWNLOAD_PATH/src or $GOPATH/src.

    The destination path is the only thing printed to stdout, so the command
    composes with `cd "$(git-smart-clone owner/repo)"`.
    """
    _ = version  # handled via callback
    configure_logging(verbose)
    console = Console(stderr=True)
    try:
        service = CloneService(root=resolve_root(), console=console)
        destination = service.clone(
            repository,
            branch=branch,
            protocol="https" if https else "ssh",
        )
    except CloneError as err:
        _fail(str(err))
    typer.echo(str(destination))


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
