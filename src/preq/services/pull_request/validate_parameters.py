"""Final completeness and format check before dispatch."""

from __future__ import annotations

from ...client import SUPPORTED_PROVIDERS
from ...models import ParameterSet, ResolvedParameters, split_repository
from ..base import BaseService
from ..errors import InvalidProviderError, MalformedRepositoryError, MissingFieldError

REQUIRED_FIELDS = ("source", "destination", "repository", "provider", "title")


class ValidateParametersService(BaseService[ParameterSet, ResolvedParameters]):
    """Reject the first missing field, then check repository and provider.

    Returns an immutable snapshot of the parameters on success.
    """

    def _run(self, request: ParameterSet) -> ResolvedParameters:
        for field in REQUIRED_FIELDS:
            if not getattr(request, field):
                raise MissingFieldError(field)
        if split_repository(request.repository) is None:
            raise MalformedRepositoryError(request.repository)
        if request.provider not in SUPPORTED_PROVIDERS:
            raise InvalidProviderError(request.provider, SUPPORTED_PROVIDERS)
        return ResolvedParameters(
            provider=request.provider,  # type: ignore[arg-type]
            repository=request.repository,
            source=request.source,
            destination=request.destination,
            title=request.title,
            description=request.description,
            close_branch=request.close_branch,
            work_in_progress=request.work_in_progress,
        )
