"""Implementation for the ``preq create`` command."""

from __future__ import annotations

from .. import config, log
from ..client import HostingClient, default_client
from ..git import GitCli, GitIntrospector
from ..io import die, say
from ..models import CreateFlags, PullRequestResult
from ..services import ServiceFailure
from ..services.pull_request import CreatePullRequestPipeline

EXIT_FAILURE = 3


def _failure_text(error: ServiceFailure) -> str:
    if error.recovery_hint:
        return f"{error} ({error.recovery_hint})"
    return str(error)


def render_result(result: PullRequestResult) -> None:
    say(f"Created a pull request: {result.source} -> {result.destination}")
    say(f"   {result.url}")


def create_pull_request(
    flags: CreateFlags,
    *,
    git: GitIntrospector | None = None,
    client: HostingClient | None = None,
) -> None:
    """Create a pull request for the current repository.

    Exits with status 3 after printing the error on any failure.
    """
    try:
        active_client = client or default_client(config.load_config())
        pipeline = CreatePullRequestPipeline(git=git or GitCli(), client=active_client)
        result = pipeline.run(flags)
    except ServiceFailure as exc:
        log.debug(f"create failed ({exc.code})")
        die(_failure_text(exc), code=EXIT_FAILURE)
        return
    render_result(result)
