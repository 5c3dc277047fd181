"""Build the pull request request and submit it to the hosting provider."""

from __future__ import annotations

from ... import log
from ...client import HostingClient
from ...models import (
    PullRequestRequest,
    PullRequestResult,
    RepositoryReference,
    ResolvedParameters,
    effective_title,
    split_repository,
)
from ..base import BaseService
from ..errors import MalformedRepositoryError


def build_request(params: ResolvedParameters) -> PullRequestRequest:
    """Derive the outbound request from validated parameters."""
    parts = split_repository(params.repository)
    if parts is None:
        raise MalformedRepositoryError(params.repository)
    owner, name = parts
    return PullRequestRequest(
        repository=RepositoryReference(provider=params.provider, owner=owner, name=name),
        source=params.source,
        destination=params.destination,
        title=effective_title(params.title, work_in_progress=params.work_in_progress),
        description=params.description,
        close_branch=params.close_branch,
    )


class DispatchPullRequestService(BaseService[ResolvedParameters, PullRequestResult]):
    """Submit exactly one creation call; client failures propagate unchanged."""

    def __init__(self, *, client: HostingClient) -> None:
        self._client = client

    def _run(self, request: ResolvedParameters) -> PullRequestResult:
        outbound = build_request(request)
        log.debug(
            f"creating pull request on {outbound.repository.provider} "
            f"{outbound.repository.slug}: {outbound.source} -> {outbound.destination}"
        )
        return self._client.create_pull_request(outbound)
