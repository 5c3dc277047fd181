"""Resolve, validate, and submit a pull request for one command invocation."""

from __future__ import annotations

from typing import Sequence

from ... import log
from ...client import HostingClient
from ...git import GitIntrospector
from ...models import CreateFlags, ParameterSet, PullRequestResult, ResolvedParameters
from .dispatch_request import DispatchPullRequestService
from .resolve_defaults import DEFAULT_DESTINATION_PRIORITY, ResolveDefaultsService
from .resolve_flags import ApplyFlagsRequest, ApplyFlagsService
from .resolve_interactive import PromptParametersService
from .validate_parameters import ValidateParametersService


class CreatePullRequestPipeline:
    """Run the resolution phases in order, then dispatch once.

    Phases: repository defaults, explicit flags, optional prompts, validation,
    dispatch. Any ``ServiceFailure`` aborts the run.
    """

    def __init__(
        self,
        *,
        git: GitIntrospector,
        client: HostingClient,
        prompter: PromptParametersService | None = None,
        destination_priority: Sequence[str] = DEFAULT_DESTINATION_PRIORITY,
    ) -> None:
        self._resolve_defaults = ResolveDefaultsService(
            git=git, destination_priority=destination_priority
        )
        self._apply_flags = ApplyFlagsService()
        self._prompt = prompter or PromptParametersService()
        self._validate = ValidateParametersService()
        self._dispatch = DispatchPullRequestService(client=client)

    def resolve(self, flags: CreateFlags) -> ResolvedParameters:
        """Resolve and validate parameters without dispatching."""
        params = ParameterSet()
        self._resolve_defaults(params)
        self._apply_flags(ApplyFlagsRequest(params=params, flags=flags))
        if flags.interactive:
            log.debug("prompting for pull request parameters")
            self._prompt(params)
        return self._validate(params)

    def run(self, flags: CreateFlags) -> PullRequestResult:
        return self._dispatch(self.resolve(flags))
