"""Hosting provider API clients for creating pull requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from . import log
from .config import DEFAULT_BITBUCKET_API_URL, DEFAULT_TIMEOUT_SECONDS, PreqConfig
from .models import (
    BITBUCKET_CLOUD,
    PROVIDER_VALUES,
    PullRequestRequest,
    PullRequestResult,
)
from .services.errors import DependencyMissingError, HostingApiError

SUPPORTED_PROVIDERS: tuple[str, ...] = PROVIDER_VALUES


class HostingClient(Protocol):
    """Pull-request-creation capability of a hosting provider."""

    def create_pull_request(self, request: PullRequestRequest) -> PullRequestResult: ...


class _BranchRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class _BranchEndpoint(BaseModel):
    model_config = ConfigDict(extra="ignore")

    branch: _BranchRef


class _Link(BaseModel):
    model_config = ConfigDict(extra="ignore")

    href: str


class _Links(BaseModel):
    model_config = ConfigDict(extra="ignore")

    html: _Link


class BitbucketPullRequestBoundary(BaseModel):
    """Validated subset of a Bitbucket Cloud pull request payload."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    source: _BranchEndpoint
    destination: _BranchEndpoint
    links: _Links

    def to_result(self) -> PullRequestResult:
        return PullRequestResult(
            source=self.source.branch.name,
            destination=self.destination.branch.name,
            url=self.links.html.href,
            id=self.id,
        )


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message.strip():
                return message.strip()
    text = (response.text or "").strip()
    return text or response.reason or "request failed"


@dataclass(frozen=True)
class BitbucketCloudClient:
    """Bitbucket Cloud REST adapter."""

    username: str
    app_password: str
    api_url: str = DEFAULT_BITBUCKET_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def pull_requests_url(self, owner: str, name: str) -> str:
        return f"{self.api_url}/repositories/{owner}/{name}/pullrequests"

    def create_pull_request(self, request: PullRequestRequest) -> PullRequestResult:
        repository = request.repository
        if repository.provider != BITBUCKET_CLOUD:
            raise HostingApiError(
                f"unsupported provider for bitbucket client: {repository.provider}"
            )
        url = self.pull_requests_url(repository.owner, repository.name)
        body: dict[str, object] = {
            "title": request.title,
            "source": {"branch": {"name": request.source}},
            "destination": {"branch": {"name": request.destination}},
            "close_source_branch": request.close_branch,
        }
        if request.description:
            body["description"] = request.description

        log.debug(f"POST {url}")
        try:
            response = requests.post(
                url,
                json=body,
                auth=(self.username, self.app_password),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise HostingApiError(f"failed to reach bitbucket: {exc}") from exc

        if not response.ok:
            raise HostingApiError(
                f"bitbucket returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            boundary = BitbucketPullRequestBoundary.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise HostingApiError(f"unexpected bitbucket response: {exc}") from exc
        return boundary.to_result()


def default_client(config: PreqConfig) -> HostingClient:
    """Build the hosting client from user configuration.

    Raises:
        DependencyMissingError: When Bitbucket credentials are not configured.
    """
    section = config.bitbucket
    if not section.username or not section.app_password:
        raise DependencyMissingError(
            "bitbucket credentials are not configured",
            recovery_hint=(
                "set PREQ_BITBUCKET_USERNAME and PREQ_BITBUCKET_APP_PASSWORD "
                "or add them to the preq config file"
            ),
        )
    return BitbucketCloudClient(
        username=section.username,
        app_password=section.app_password,
        api_url=section.api_url,
        timeout_seconds=section.timeout_seconds,
    )
