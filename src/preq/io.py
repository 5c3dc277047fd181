"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

import questionary

from .services.errors import PromptAbortedError

AnswerCheck = Callable[[str], "str | None"]
"""Returns an error message for an invalid answer, ``None`` when valid."""


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def warn(message: str) -> None:
    """Print a warning message to stderr.

    Args:
        message: Warning text.
    """
    print(f"warning: {message}", file=sys.stderr)


def die(message: str, code: int = 1) -> None:
    """Print an error message to stdout and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(message)
    sys.exit(code)


def _questionary_check(check: AnswerCheck | None) -> Callable[[str], bool | str]:
    def validate(value: str) -> bool | str:
        if check is None:
            return True
        problem = check(str(value).strip())
        return True if problem is None else problem

    return validate


def ask_text(text: str, default: str = "", check: AnswerCheck | None = None) -> str:
    """Prompt for a line of text, pre-filled with ``default``.

    Args:
        text: Prompt label shown to the user.
        default: Value shown and used when the user just presses enter.
        check: Optional validator; the prompt repeats until it passes.

    Returns:
        The stripped answer.

    Raises:
        PromptAbortedError: When the prompt is cancelled (Ctrl-C or EOF).
    """
    if _use_questionary():
        answer = questionary.text(
            text, default=default, validate=_questionary_check(check)
        ).ask()
        if answer is None:
            raise PromptAbortedError()
        return str(answer).strip()

    while True:
        label = f"{text} [{default}]: " if default else f"{text}: "
        try:
            value = input(label).strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAbortedError() from exc
        if value == "":
            value = default
        problem = check(value) if check is not None else None
        if problem is None:
            return value
        warn(problem)


def ask_select(text: str, choices: Sequence[str], default: str | None = None) -> str:
    """Prompt for one of ``choices``.

    An empty or unknown ``default`` is not offered, so an explicit selection
    is required.

    Args:
        text: Prompt label shown to the user.
        choices: Allowed answers, in display order.
        default: Pre-selected answer, when it is one of ``choices``.

    Returns:
        The selected choice.

    Raises:
        PromptAbortedError: When the prompt is cancelled (Ctrl-C or EOF).
    """
    options = list(choices)
    if not options:
        raise PromptAbortedError(f"no choices available for {text!r}")
    selected_default = default if default in options else None

    if _use_questionary():
        answer = questionary.select(text, choices=options, default=selected_default).ask()
        if answer is None:
            raise PromptAbortedError()
        return str(answer)

    listing = ", ".join(options)
    while True:
        label = f"{text} ({listing})"
        label = f"{label} [{selected_default}]: " if selected_default else f"{label}: "
        try:
            value = input(label).strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAbortedError() from exc
        if value == "" and selected_default:
            return selected_default
        if value in options:
            return value
        warn(f"select one of: {listing}")
