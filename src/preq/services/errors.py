"""Service failure contracts.

Pipeline phases return typed values on success and raise ServiceFailure on
expected validation, collaborator, or user-input failures. Programmer bugs
raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "missing_field",
    "malformed_repository",
    "invalid_provider",
    "coupled_flags",
    "dependency_missing",
    "introspection_failed",
    "prompt_aborted",
    "api_failed",
]


class ServiceFailure(Exception):
    """Expected service failure: validation, policy, or runtime error.

    Use ``raise SomeFailure(...) from exc`` to chain a causing exception; it
    is available as ``__cause__``. The command layer catches ServiceFailure,
    prints the message, and exits with the uniform failure status.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (invalid input, unreadable config)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class MissingFieldError(ServiceFailure):
    """A required pull request parameter is empty after resolution."""

    def __init__(self, field: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("missing_field", f"{field} is missing", recovery_hint=recovery_hint)
        self.field = field


class MalformedRepositoryError(ServiceFailure):
    """Repository is not in the ``owner/name`` form."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "malformed_repository",
            "repository must be in the form of 'owner/repo'",
            recovery_hint=f"got {value!r}",
        )
        self.value = value


class InvalidProviderError(ServiceFailure):
    """Provider is not one of the supported hosting providers."""

    def __init__(self, value: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            "invalid_provider",
            f"unknown repository provider: {value}",
            recovery_hint="expected one of: " + ", ".join(supported),
        )
        self.value = value


class CoupledFlagsError(ServiceFailure):
    """Only one of ``--provider``/``--repository`` was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "coupled_flags",
            "must specify both provider and repository, or none",
        )


class DependencyMissingError(ServiceFailure):
    """Required dependency (credentials, executable) is missing."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class IntrospectionFailedError(ServiceFailure):
    """Repository introspection through git failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("introspection_failed", message, recovery_hint=recovery_hint)


class PromptAbortedError(ServiceFailure):
    """An interactive prompt was cancelled or could not be answered."""

    def __init__(self, message: str = "aborted") -> None:
        super().__init__("prompt_aborted", message)


class HostingApiError(ServiceFailure):
    """The hosting provider rejected or failed the request."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__("api_failed", message, recovery_hint=recovery_hint)
        self.status_code = status_code
