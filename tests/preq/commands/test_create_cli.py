import re
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import preq.cli as cli
import preq.commands.create as create_cmd
from preq.models import CreateFlags
from preq.services import HostingApiError
from tests.preq.helpers import FakeClient, FakeGit

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _strip_ansi(output: str) -> str:
    return ANSI_ESCAPE_RE.sub("", output)


class TestCreateOptions:
    def _invoke(self, args: list[str]) -> tuple[int, CreateFlags | None]:
        captured: dict[str, CreateFlags] = {}

        def fake_create(flags: CreateFlags) -> None:
            captured["flags"] = flags

        runner = CliRunner()
        with patch("preq.cli.create_pull_request", fake_create):
            result = runner.invoke(cli.app, args)
        return result.exit_code, captured.get("flags")

    def test_create_passes_options(self) -> None:
        exit_code, flags = self._invoke(
            [
                "create",
                "-r",
                "acme/widgets",
                "-p",
                "bitbucket-cloud",
                "-s",
                "feature-x",
                "-d",
                "develop",
                "-t",
                "Add feature",
                "--description",
                "Details",
                "-i",
                "--no-close",
                "--wip",
            ]
        )

        assert exit_code == 0
        assert flags == CreateFlags(
            repository="acme/widgets",
            provider="bitbucket-cloud",
            source="feature-x",
            destination="develop",
            title="Add feature",
            description="Details",
            interactive=True,
            close=False,
            wip=True,
        )

    def test_unset_bool_options_are_absent(self) -> None:
        exit_code, flags = self._invoke(["create"])

        assert exit_code == 0
        assert flags == CreateFlags()

    def test_cr_alias(self) -> None:
        exit_code, flags = self._invoke(["cr", "--close"])

        assert exit_code == 0
        assert flags is not None
        assert flags.close is True


def test_create_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    create_cmd.create_pull_request(CreateFlags(), git=FakeGit(), client=FakeClient())

    out = capsys.readouterr().out
    assert out == (
        "Created a pull request: feature-x -> develop\n"
        "   https://bitbucket.org/acme/widgets/pull-requests/7\n"
    )


def test_create_failure_exits_with_status_3(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        create_cmd.create_pull_request(
            CreateFlags(repository="a/b"), git=FakeGit(), client=FakeClient()
        )

    assert exc_info.value.code == 3
    assert "must specify both provider and repository, or none" in capsys.readouterr().out


def test_create_api_failure_is_printed_verbatim(capsys: pytest.CaptureFixture[str]) -> None:
    client = FakeClient(error=HostingApiError("bitbucket returned 409: conflict", status_code=409))

    with pytest.raises(SystemExit) as exc_info:
        create_cmd.create_pull_request(CreateFlags(), git=FakeGit(), client=client)

    assert exc_info.value.code == 3
    assert capsys.readouterr().out == "bitbucket returned 409: conflict\n"


def test_create_without_credentials_exits_with_status_3(
    monkeypatch: pytest.MonkeyPatch, tmp_path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PREQ_CONFIG", str(tmp_path / "missing.json"))
    monkeypatch.delenv("PREQ_BITBUCKET_USERNAME", raising=False)
    monkeypatch.delenv("PREQ_BITBUCKET_APP_PASSWORD", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        create_cmd.create_pull_request(CreateFlags(), git=FakeGit())

    assert exc_info.value.code == 3
    assert "bitbucket credentials are not configured" in capsys.readouterr().out


def test_cli_exit_code_on_failure() -> None:
    runner = CliRunner()
    with (
        patch("preq.commands.create.GitCli", return_value=FakeGit(remote=None)),
        patch("preq.commands.create.default_client", return_value=FakeClient()),
    ):
        result = runner.invoke(cli.app, ["create"])

    assert result.exit_code == 3
    assert "repository is missing" in result.output


def test_global_log_level_flag_sets_runtime_level() -> None:
    runner = CliRunner()
    with (
        patch("preq.cli.create_pull_request", lambda _flags: None),
        patch("preq.cli.preq_log.set_level") as mock_set_level,
    ):
        result = runner.invoke(cli.app, ["--log-level", "debug", "create"])

    assert result.exit_code == 0
    mock_set_level.assert_called_once_with("debug")


def test_global_log_level_rejects_unknown_values() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.app, ["--log-level", "loud", "create"], color=False)
    clean_output = _strip_ansi(result.output)

    assert result.exit_code != 0
    assert "expected one of" in clean_output.lower()


def test_no_color_flag_disables_colorized_output() -> None:
    runner = CliRunner()
    with (
        patch("preq.cli.create_pull_request", lambda _flags: None),
        patch("preq.cli.preq_log.set_no_color") as mock_set_no_color,
    ):
        result = runner.invoke(cli.app, ["--no-color", "create"])

    assert result.exit_code == 0
    mock_set_no_color.assert_called_once_with(True)


def test_explicit_false_bool_options_are_supplied() -> None:
    captured: dict[str, CreateFlags] = {}
    runner = CliRunner()
    with patch("preq.cli.create_pull_request", lambda flags: captured.update(flags=flags)):
        result = runner.invoke(cli.app, ["create", "--no-wip", "--no-close"])

    assert result.exit_code == 0
    assert captured["flags"].wip is False
    assert captured["flags"].close is False


def test_interrupted_prompt_exits_with_status_3(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupt(_prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    runner = CliRunner()
    with (
        patch("preq.commands.create.GitCli", return_value=FakeGit()),
        patch("preq.commands.create.default_client", return_value=FakeClient()),
    ):
        result = runner.invoke(cli.app, ["create", "-i"])

    assert result.exit_code == 3
    assert "aborted" in result.output
