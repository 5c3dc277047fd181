from .base import BaseService
from .errors import (
    CoupledFlagsError,
    DependencyMissingError,
    HostingApiError,
    IntrospectionFailedError,
    InvalidProviderError,
    MalformedRepositoryError,
    MissingFieldError,
    PromptAbortedError,
    ServiceFailure,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "CoupledFlagsError",
    "DependencyMissingError",
    "HostingApiError",
    "IntrospectionFailedError",
    "InvalidProviderError",
    "MalformedRepositoryError",
    "MissingFieldError",
    "PromptAbortedError",
    "ServiceFailure",
    "ValidationFailedError",
]
