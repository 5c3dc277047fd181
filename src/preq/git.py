"""Git repository introspection used to default pull request parameters."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence
from urllib.parse import urlparse

from . import exec as exec_util
from .models import BITBUCKET_CLOUD, split_repository
from .services.errors import IntrospectionFailedError

DEFAULT_REMOTE = "origin"

PROVIDER_BY_HOST = {
    "bitbucket.org": BITBUCKET_CLOUD,
    "www.bitbucket.org": BITBUCKET_CLOUD,
}


@dataclass(frozen=True)
class RemoteInfo:
    owner: str
    name: str
    provider: str


class GitIntrospector(Protocol):
    """Read-only view of the current repository.

    Every method raises ``IntrospectionFailedError`` when the fact cannot be
    determined.
    """

    def current_branch(self) -> str: ...

    def closest_branch(self, priority: Sequence[str]) -> str: ...

    def current_commit_message(self) -> str: ...

    def remote_info(self) -> RemoteInfo: ...


def strip_git_suffix(path: str) -> str:
    """Remove a trailing ``.git`` suffix from a path string.

    Example:
        >>> strip_git_suffix("example/repo.git")
        'example/repo'
    """
    normalized = path.strip().rstrip("/")
    if normalized.lower().endswith(".git"):
        return normalized[: -len(".git")]
    return normalized


def parse_remote_url(value: str) -> tuple[str, str] | None:
    """Split a remote URL into ``(host, path)``.

    Supports SSH SCP-style URLs and ``http``/``https``/``ssh``/``git`` URLs.

    Example:
        >>> parse_remote_url("git@bitbucket.org:acme/widgets.git")
        ('bitbucket.org', 'acme/widgets')
        >>> parse_remote_url("https://user@bitbucket.org/acme/widgets.git")
        ('bitbucket.org', 'acme/widgets')
    """
    raw = value.strip()
    if not raw:
        return None

    if "://" in raw:
        parsed = urlparse(raw)
        scheme = (parsed.scheme or "").lower()
        host = (parsed.hostname or "").lower()
        if scheme not in {"http", "https", "ssh", "git"} or not host:
            return None
        return host, strip_git_suffix((parsed.path or "").lstrip("/"))

    scp_match = re.match(r"^(?:(?P<user>[^@]+)@)?(?P<host>[^:/]+):(?P<path>.+)$", raw)
    if scp_match:
        host = scp_match.group("host").lower()
        return host, strip_git_suffix(scp_match.group("path").lstrip("/"))
    return None


def remote_info_from_url(value: str) -> RemoteInfo:
    """Derive owner, name, and provider from a remote URL.

    Raises:
        IntrospectionFailedError: When the URL cannot be parsed, the host is
            not a known provider, or the path is not ``owner/name``.
    """
    parsed = parse_remote_url(value)
    if parsed is None:
        raise IntrospectionFailedError(f"unrecognized remote url: {value}")
    host, path = parsed
    provider = PROVIDER_BY_HOST.get(host)
    if provider is None:
        raise IntrospectionFailedError(f"unsupported remote host: {host}")
    parts = split_repository(path)
    if parts is None:
        raise IntrospectionFailedError(f"remote path is not owner/name: {path}")
    owner, name = parts
    return RemoteInfo(owner=owner, name=name, provider=provider)


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path."""
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    if not resolved:
        resolved = "git"
    return [resolved, *args]


class GitCli:
    """GitIntrospector backed by the ``git`` executable."""

    def __init__(
        self,
        repo_dir: Path | None = None,
        *,
        git_path: str | None = None,
        remote: str = DEFAULT_REMOTE,
        runner: exec_util.CommandRunner | None = None,
    ) -> None:
        self._repo_dir = repo_dir or Path.cwd()
        self._git_path = git_path
        self._remote = remote
        self._runner = runner

    def _run(self, args: list[str]) -> exec_util.CommandResult:
        argv = git_command(["-C", str(self._repo_dir), *args], git_path=self._git_path)
        result = exec_util.run_with_runner(
            exec_util.CommandRequest(argv=tuple(argv)), runner=self._runner
        )
        if result is None:
            raise IntrospectionFailedError(
                f"missing required command: {argv[0]}",
                recovery_hint="install git or configure its path",
            )
        return result

    def _output(self, args: list[str]) -> str:
        result = self._run(args)
        if result.returncode != 0:
            raise IntrospectionFailedError(exec_util.command_failure_detail(result))
        return result.stdout.strip()

    def current_branch(self) -> str:
        branch = self._output(["rev-parse", "--abbrev-ref", "HEAD"])
        if not branch or branch == "HEAD":
            raise IntrospectionFailedError("not on a branch (detached HEAD)")
        return branch

    def branch_exists(self, branch: str) -> bool:
        for ref in (f"refs/heads/{branch}", f"refs/remotes/{self._remote}/{branch}"):
            result = self._run(["rev-parse", "--verify", "--quiet", ref])
            if result.returncode == 0:
                return True
        return False

    def closest_branch(self, priority: Sequence[str]) -> str:
        for branch in priority:
            if self.branch_exists(branch):
                return branch
        raise IntrospectionFailedError(
            "none of the candidate branches exist: " + ", ".join(priority)
        )

    def current_commit_message(self) -> str:
        message = self._output(["log", "-1", "--pretty=%s"])
        if not message:
            raise IntrospectionFailedError("no commits on the current branch")
        return message

    def remote_url(self) -> str:
        url = self._output(["remote", "get-url", self._remote])
        if not url:
            raise IntrospectionFailedError(f"remote {self._remote} has no url")
        return url

    def remote_info(self) -> RemoteInfo:
        return remote_info_from_url(self.remote_url())
