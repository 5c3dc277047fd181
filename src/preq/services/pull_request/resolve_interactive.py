"""Interactive confirmation of pull request parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from ... import log
from ...client import SUPPORTED_PROVIDERS
from ...io import AnswerCheck, ask_select, ask_text
from ...models import ParameterSet, split_repository
from ..base import BaseService


class TextAsker(Protocol):
    """Typed dependency for free-text prompts."""

    def __call__(self, text: str, default: str = "", check: AnswerCheck | None = None) -> str:
        """Return the answer once ``check`` accepts it."""
        ...


class ChoiceAsker(Protocol):
    """Typed dependency for selection prompts."""

    def __call__(self, text: str, choices: Sequence[str], default: str | None = None) -> str:
        """Return one of ``choices``."""
        ...


def require_value(value: str) -> str | None:
    if not value.strip():
        return "value is required"
    return None


def require_repository(value: str) -> str | None:
    problem = require_value(value)
    if problem is not None:
        return problem
    if split_repository(value.strip()) is None:
        return "repository must be in the form of 'owner/repo'"
    return None


def require_provider(value: str) -> str | None:
    problem = require_value(value)
    if problem is not None:
        return problem
    if value not in SUPPORTED_PROVIDERS:
        return "expected one of: " + ", ".join(SUPPORTED_PROVIDERS)
    return None


@dataclass(frozen=True)
class PromptField:
    """One prompt in the interactive sequence.

    Args:
        field: Parameter name, used for logging.
        message: Prompt label.
        read: Returns the current value shown as the default.
        write: Stores the answer on the parameters.
        check: Validates an answer; returns a problem description or ``None``.
        choices: When set, the prompt is a selection among these values.
    """

    field: str
    message: str
    read: Callable[[ParameterSet], str]
    write: Callable[[ParameterSet, str], None]
    check: AnswerCheck
    choices: tuple[str, ...] | None = None


def _set_provider(params: ParameterSet, value: str) -> None:
    params.provider = value


def _set_repository(params: ParameterSet, value: str) -> None:
    params.repository = value


def _set_source(params: ParameterSet, value: str) -> None:
    params.source = value


def _set_destination(params: ParameterSet, value: str) -> None:
    params.destination = value


def _set_title(params: ParameterSet, value: str) -> None:
    params.title = value


PROMPT_FIELDS: tuple[PromptField, ...] = (
    PromptField(
        field="provider",
        message="Provider:",
        read=lambda params: params.provider,
        write=_set_provider,
        check=require_provider,
        choices=SUPPORTED_PROVIDERS,
    ),
    PromptField(
        field="repository",
        message="Repository",
        read=lambda params: params.repository,
        write=_set_repository,
        check=require_repository,
    ),
    PromptField(
        field="source",
        message="Source branch",
        read=lambda params: params.source,
        write=_set_source,
        check=require_value,
    ),
    PromptField(
        field="destination",
        message="Destination branch",
        read=lambda params: params.destination,
        write=_set_destination,
        check=require_value,
    ),
    PromptField(
        field="title",
        message="Title",
        read=lambda params: params.title,
        write=_set_title,
        check=require_value,
    ),
)


class PromptParametersService(BaseService[ParameterSet, ParameterSet]):
    """Ask for each prompted field in order and overwrite it with the answer.

    Cancelling a prompt raises ``PromptAbortedError`` from the asker.
    """

    def __init__(
        self,
        *,
        ask_text: TextAsker = ask_text,
        ask_select: ChoiceAsker = ask_select,
        fields: Sequence[PromptField] = PROMPT_FIELDS,
    ) -> None:
        self._ask_text = ask_text
        self._ask_select = ask_select
        self._fields = tuple(fields)

    def _ask(self, prompt: PromptField, current: str) -> str:
        if prompt.choices is not None:
            while True:
                # An empty current value is passed as no default so the user
                # must pick explicitly.
                answer = self._ask_select(prompt.message, prompt.choices, current or None)
                problem = prompt.check(answer)
                if problem is None:
                    return answer
                log.warning(f"{prompt.field}: {problem}")
        return self._ask_text(prompt.message, current, prompt.check).strip()

    def _run(self, request: ParameterSet) -> ParameterSet:
        params = request
        for prompt in self._fields:
            answer = self._ask(prompt, prompt.read(params))
            prompt.write(params, answer)
            log.trace(f"{prompt.field} <- {answer!r}")
        return params
