import builtins
from unittest.mock import MagicMock, patch

import pytest

import preq.io as io
from preq.services import PromptAbortedError


def _answers(monkeypatch: pytest.MonkeyPatch, *values: str) -> list[str]:
    prompts: list[str] = []
    remaining = list(values)

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def test_ask_text_uses_default_on_empty_answer(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _answers(monkeypatch, "")

    assert io.ask_text("Source branch", default="feature-x") == "feature-x"
    assert prompts == ["Source branch [feature-x]: "]


def test_ask_text_repeats_until_check_passes(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _answers(monkeypatch, "", "  main ")

    def check(value: str) -> str | None:
        return None if value else "value is required"

    assert io.ask_text("Destination branch", check=check) == "main"
    assert "value is required" in capsys.readouterr().err


def test_ask_text_eof_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    _answers(monkeypatch)

    with pytest.raises(PromptAbortedError):
        io.ask_text("Title")


def _interrupt(_prompt: str = "") -> str:
    raise KeyboardInterrupt


def test_ask_text_ctrl_c_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(builtins, "input", _interrupt)

    with pytest.raises(PromptAbortedError):
        io.ask_text("Title", default="Add feature")


def test_ask_select_ctrl_c_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(builtins, "input", _interrupt)

    with pytest.raises(PromptAbortedError):
        io.ask_select("Provider:", ["bitbucket-cloud"], default="bitbucket-cloud")


def test_ask_select_requires_explicit_choice_without_default(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    prompts = _answers(monkeypatch, "", "bitbucket-cloud")

    assert io.ask_select("Provider:", ["bitbucket-cloud"], default=None) == "bitbucket-cloud"
    assert len(prompts) == 2


def test_ask_select_accepts_default(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _answers(monkeypatch, "")

    assert io.ask_select("Provider:", ["bitbucket-cloud"], default="bitbucket-cloud") == (
        "bitbucket-cloud"
    )
    assert prompts == ["Provider: (bitbucket-cloud) [bitbucket-cloud]: "]


def test_ask_select_ignores_unknown_default(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _answers(monkeypatch, "bitbucket-cloud")

    io.ask_select("Provider:", ["bitbucket-cloud"], default="github")

    assert prompts == ["Provider: (bitbucket-cloud): "]


def test_questionary_select_passes_no_default_for_empty_value(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    question = MagicMock()
    question.ask.return_value = "bitbucket-cloud"
    with patch("preq.io.questionary.select", return_value=question) as mock_select:
        answer = io.ask_select("Provider:", ["bitbucket-cloud"], default="")

    assert answer == "bitbucket-cloud"
    assert mock_select.call_args.kwargs["default"] is None


def test_questionary_cancel_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    question = MagicMock()
    question.ask.return_value = None
    with patch("preq.io.questionary.text", return_value=question):
        with pytest.raises(PromptAbortedError):
            io.ask_text("Title", default="Add feature")


def test_die_prints_to_stdout_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        io.die("source is missing", code=3)

    assert exc_info.value.code == 3
    assert capsys.readouterr().out == "source is missing\n"
