"""Overlay explicit command-line options onto resolved parameters."""

from __future__ import annotations

from dataclasses import dataclass

from ... import log
from ...client import SUPPORTED_PROVIDERS
from ...models import CreateFlags, ParameterSet, split_repository
from ..base import BaseService
from ..errors import CoupledFlagsError, InvalidProviderError, MalformedRepositoryError


@dataclass(frozen=True)
class ApplyFlagsRequest:
    params: ParameterSet
    flags: CreateFlags


def check_flag_repository(flags: CreateFlags) -> None:
    """Enforce that ``--provider`` and ``--repository`` come together.

    Only the flags themselves are checked; values defaulted from the
    repository do not count.

    Raises:
        CoupledFlagsError: When exactly one of the two is supplied.
        MalformedRepositoryError: When the repository is not ``owner/name``.
        InvalidProviderError: When the provider is not supported.
    """
    if (flags.repository is None) != (flags.provider is None):
        raise CoupledFlagsError()
    if flags.repository is None or flags.provider is None:
        return
    if split_repository(flags.repository) is None:
        raise MalformedRepositoryError(flags.repository)
    if flags.provider not in SUPPORTED_PROVIDERS:
        raise InvalidProviderError(flags.provider, SUPPORTED_PROVIDERS)


class ApplyFlagsService(BaseService[ApplyFlagsRequest, ParameterSet]):
    """Replace parameters with every supplied flag; leave the rest alone."""

    def _run(self, request: ApplyFlagsRequest) -> ParameterSet:
        flags = request.flags
        params = request.params
        check_flag_repository(flags)

        if flags.repository is not None and flags.provider is not None:
            params.repository = flags.repository
            params.provider = flags.provider
        if flags.source is not None:
            params.source = flags.source
        if flags.destination is not None:
            params.destination = flags.destination
        if flags.title is not None:
            params.title = flags.title
        if flags.description is not None:
            params.description = flags.description
        if flags.close is not None:
            params.close_branch = flags.close
        if flags.wip is not None:
            params.work_in_progress = flags.wip

        log.trace(f"flags applied: {params}")
        return params
