# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import preq.io as io
import preq.log as preq_log

DOCTEST_MODULES = {
    ROOT / "src" / "preq" / "__init__.py",
    ROOT / "src" / "preq" / "config.py",
    ROOT / "src" / "preq" / "git.py",
    ROOT / "src" / "preq" / "models.py",
}


@pytest.fixture(autouse=True)
def _quiet_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(preq_log, "_configured_level", None)
    monkeypatch.setattr(preq_log, "_no_color_override", None)
    monkeypatch.delenv("PREQ_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
