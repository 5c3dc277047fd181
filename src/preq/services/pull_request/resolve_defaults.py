"""Best-effort defaults for pull request parameters from the local repository."""

from __future__ import annotations

from typing import Callable, Sequence

from ... import log
from ...git import GitIntrospector
from ...models import ParameterSet
from ..base import BaseService
from ..errors import IntrospectionFailedError

DEFAULT_DESTINATION_PRIORITY = ("master", "develop")


class ResolveDefaultsService(BaseService[ParameterSet, ParameterSet]):
    """Fill parameters from git introspection.

    Each facet is looked up independently. A failed lookup leaves its field
    untouched and is only logged.
    """

    def __init__(
        self,
        *,
        git: GitIntrospector,
        destination_priority: Sequence[str] = DEFAULT_DESTINATION_PRIORITY,
    ) -> None:
        self._git = git
        self._destination_priority = tuple(destination_priority)

    def _attempt(self, facet: str, lookup: Callable[[], None]) -> None:
        try:
            lookup()
        except IntrospectionFailedError as exc:
            log.debug(f"no default {facet}: {exc}")

    def _run(self, request: ParameterSet) -> ParameterSet:
        params = request

        def source() -> None:
            params.source = self._git.current_branch()

        def destination() -> None:
            params.destination = self._git.closest_branch(self._destination_priority)

        def title() -> None:
            params.title = self._git.current_commit_message()

        def repository() -> None:
            remote = self._git.remote_info()
            params.repository = f"{remote.owner}/{remote.name}"
            params.provider = remote.provider

        self._attempt("source", source)
        self._attempt("destination", destination)
        self._attempt("title", title)
        self._attempt("repository", repository)
        log.trace(f"defaults resolved: {params}")
        return params
