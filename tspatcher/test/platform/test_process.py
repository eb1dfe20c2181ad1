"""Tests for tspatcher.platform.process."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tspatcher.core.result import Err, Ok
from tspatcher.platform.process import ProcessError, format_command, run_silent


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("corepack", "npm", "ci"), returncode=1)
        assert str(error) == "corepack npm ci failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(command=("corepack", "npx", "hereby", "LKG"), returncode=2)
        assert str(error) == "corepack npx hereby ... failed (exit 2)"


def test_format_command_quotes() -> None:
    assert format_command(["git", "clone", "a b"]) == "git clone 'a b'"


class TestRunSilent:
    def test_success(self, tmp_path: Path) -> None:
        assert run_silent([sys.executable, "-c", "pass"], cwd=tmp_path) == Ok(None)

    def test_failure_returns_exit_code(self, tmp_path: Path) -> None:
        result = run_silent([sys.executable, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_silent(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert result.error.stderr

    def test_runs_in_cwd(self, tmp_path: Path) -> None:
        script = "import pathlib; pathlib.Path('marker').write_text('x')"
        assert isinstance(run_silent([sys.executable, "-c", script], cwd=tmp_path), Ok)
        assert (tmp_path / "marker").exists()

    def test_output_is_not_captured(self, tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
        run_silent([sys.executable, "-c", "print('streamed')"], cwd=tmp_path)
        assert "streamed" in capfd.readouterr().out
