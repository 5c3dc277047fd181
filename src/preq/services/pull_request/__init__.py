"""Pull request parameter resolution and dispatch services."""

from .dispatch_request import DispatchPullRequestService, build_request
from .pipeline import CreatePullRequestPipeline
from .resolve_defaults import DEFAULT_DESTINATION_PRIORITY, ResolveDefaultsService
from .resolve_flags import ApplyFlagsRequest, ApplyFlagsService, check_flag_repository
from .resolve_interactive import PROMPT_FIELDS, PromptField, PromptParametersService
from .validate_parameters import REQUIRED_FIELDS, ValidateParametersService

__all__ = [
    "DEFAULT_DESTINATION_PRIORITY",
    "PROMPT_FIELDS",
    "REQUIRED_FIELDS",
    "ApplyFlagsRequest",
    "ApplyFlagsService",
    "CreatePullRequestPipeline",
    "DispatchPullRequestService",
    "PromptField",
    "PromptParametersService",
    "ResolveDefaultsService",
    "ValidateParametersService",
    "build_request",
    "check_flag_repository",
]
