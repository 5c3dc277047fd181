from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from preq.git import RemoteInfo
from preq.models import PullRequestRequest, PullRequestResult
from preq.services import HostingApiError, IntrospectionFailedError


class FakeGit:
    """GitIntrospector returning canned answers; ``None`` means the lookup fails."""

    def __init__(
        self,
        *,
        branch: str | None = "feature-x",
        branches: Sequence[str] = ("develop",),
        message: str | None = "Add feature",
        remote: RemoteInfo | None = RemoteInfo("acme", "widgets", "bitbucket-cloud"),
    ) -> None:
        self.branch = branch
        self.branches = tuple(branches)
        self.message = message
        self.remote = remote
        self.priorities: list[tuple[str, ...]] = []

    def current_branch(self) -> str:
        if self.branch is None:
            raise IntrospectionFailedError("not on a branch")
        return self.branch

    def closest_branch(self, priority: Sequence[str]) -> str:
        self.priorities.append(tuple(priority))
        for candidate in priority:
            if candidate in self.branches:
                return candidate
        raise IntrospectionFailedError("no candidate branch")

    def current_commit_message(self) -> str:
        if self.message is None:
            raise IntrospectionFailedError("no commits")
        return self.message

    def remote_info(self) -> RemoteInfo:
        if self.remote is None:
            raise IntrospectionFailedError("no remote")
        return self.remote


@dataclass
class FakeClient:
    url: str = "https://bitbucket.org/acme/widgets/pull-requests/7"
    error: HostingApiError | None = None
    requests: list[PullRequestRequest] = field(default_factory=list)

    def create_pull_request(self, request: PullRequestRequest) -> PullRequestResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return PullRequestResult(
            source=request.source,
            destination=request.destination,
            url=self.url,
            id=7,
        )
