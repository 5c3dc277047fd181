"""Data model for pull request parameter resolution.

``ParameterSet`` is the mutable record threaded through the resolution
phases. ``ResolvedParameters`` is the immutable snapshot produced once
validation passes; request objects are derived from it.

Example:
    >>> split_repository("acme/widgets")
    ('acme', 'widgets')
    >>> split_repository("acme/") is None
    True
    >>> effective_title("Fix bug", work_in_progress=True)
    '[WIP] Fix bug'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

BITBUCKET_CLOUD = "bitbucket-cloud"
PROVIDER_VALUES = (BITBUCKET_CLOUD,)
Provider = Literal["bitbucket-cloud"]

WIP_PREFIX = "[WIP] "


def split_repository(value: str) -> tuple[str, str] | None:
    """Split ``owner/name`` into its parts.

    Returns:
        ``(owner, name)`` when the value has exactly two non-empty parts,
        otherwise ``None``.
    """
    parts = value.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def effective_title(title: str, *, work_in_progress: bool) -> str:
    """Return the title to submit, marked when work is in progress."""
    if work_in_progress:
        return f"{WIP_PREFIX}{title}"
    return title


@dataclass
class ParameterSet:
    """Pull request parameters as resolved so far.

    Empty strings mean "not resolved". Each resolution phase mutates the same
    instance in place.
    """

    provider: str = ""
    repository: str = ""
    source: str = ""
    destination: str = ""
    title: str = ""
    description: str = ""
    close_branch: bool = True
    work_in_progress: bool = False


@dataclass(frozen=True)
class ResolvedParameters:
    """Validated, read-only pull request parameters."""

    provider: Provider
    repository: str
    source: str
    destination: str
    title: str
    description: str
    close_branch: bool
    work_in_progress: bool


@dataclass(frozen=True)
class RepositoryReference:
    provider: Provider
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class PullRequestRequest:
    """Outbound pull-request-creation request."""

    repository: RepositoryReference
    source: str
    destination: str
    title: str
    description: str
    close_branch: bool


@dataclass(frozen=True)
class PullRequestResult:
    """Pull request created by the hosting provider."""

    source: str
    destination: str
    url: str
    id: int | None = None


def _clean_optional(value: object) -> object:
    if value is None:
        return None
    if isinstance(value, str):
        cleaned = value.strip()
        return cleaned or None
    return value


class CreateFlags(BaseModel):
    """Explicit ``create`` command options.

    ``None`` means the option was not supplied. Blank strings are treated as
    not supplied.

    Example:
        >>> CreateFlags(title="  ").title is None
        True
    """

    model_config = ConfigDict(frozen=True)

    repository: str | None = None
    provider: str | None = None
    source: str | None = None
    destination: str | None = None
    title: str | None = None
    description: str | None = None
    interactive: bool = False
    close: bool | None = None
    wip: bool | None = None

    @field_validator(
        "repository",
        "provider",
        "source",
        "destination",
        "title",
        "description",
        mode="before",
    )
    @classmethod
    def _normalize_text(cls, value: object) -> object:
        return _clean_optional(value)
