"""Command-line entry point for preq."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from . import __version__
from . import log as preq_log
from .commands import create_pull_request
from .models import CreateFlags

app = typer.Typer(
    name="preq",
    help="Create pull requests on the service hosting your repository.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in preq_log.LEVEL_NAMES:
        raise typer.BadParameter("expected one of: " + ", ".join(preq_log.LEVEL_NAMES))
    return normalized


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=_log_level_callback,
            help="Log level (trace, debug, info, success, warning, error).",
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colorized output.")
    ] = False,
) -> None:
    """Create pull requests on the service hosting your repository."""
    if log_level is not None:
        preq_log.set_level(log_level)
    if no_color:
        preq_log.set_no_color(True)


def create(
    repository: Annotated[
        Optional[str],
        typer.Option("--repository", "-r", help="Repository in the form owner/repo."),
    ] = None,
    provider: Annotated[
        Optional[str],
        typer.Option("--provider", "-p", help="Repository host (bitbucket-cloud)."),
    ] = None,
    source: Annotated[
        Optional[str],
        typer.Option(
            "--source", "-s", help="Source branch (default: checked out branch)."
        ),
    ] = None,
    destination: Annotated[
        Optional[str],
        typer.Option(
            "--destination",
            "-d",
            help="Destination branch (default: first of master, develop).",
        ),
    ] = None,
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="Title (default: last commit message)."),
    ] = None,
    description: Annotated[
        Optional[str],
        typer.Option("--description", help="Description of the pull request."),
    ] = None,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Confirm each value interactively."),
    ] = False,
    close: Annotated[
        Optional[bool],
        typer.Option("--close/--no-close", help="Close the source branch after merge."),
    ] = None,
    wip: Annotated[
        Optional[bool],
        typer.Option("--wip/--no-wip", help="Mark the pull request as Work-In-Progress."),
    ] = None,
) -> None:
    """Create a pull request on the service hosting your origin repository."""
    flags = CreateFlags(
        repository=repository,
        provider=provider,
        source=source,
        destination=destination,
        title=title,
        description=description,
        interactive=interactive,
        close=close,
        wip=wip,
    )
    create_pull_request(flags)


app.command("create", help="Create pull request.")(create)
app.command("cr", hidden=True, help="Alias for create.")(create)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
