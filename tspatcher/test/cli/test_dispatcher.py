"""Tests for top-level dispatch, usage text and exit codes."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tspatcher import __version__
from tspatcher.cli.app import app
from tspatcher.cli.usage import SUBCOMMAND_USAGE, full_usage, subcommand_usage
from tspatcher.core.errors import ErrorCode

runner = CliRunner()


def test_no_arguments_prints_usage_and_fails() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert full_usage() in result.output


def test_help_prints_usage_and_succeeds() -> None:
    result = runner.invoke(app, ["help"])

    assert result.exit_code == 0
    assert full_usage() in result.output


@pytest.mark.parametrize("name", sorted(SUBCOMMAND_USAGE))
def test_help_for_each_subcommand(name: str) -> None:
    result = runner.invoke(app, ["help", name])

    assert result.exit_code == 0
    assert "Subcommand usage:" in result.output
    assert f"tspatcher {name}" in result.output
    assert "Usage:\n" not in result.output


def test_help_for_unknown_subcommand_falls_back_to_full_usage() -> None:
    result = runner.invoke(app, ["help", "deploy"])

    assert result.exit_code == 0
    assert full_usage() in result.output


def test_unknown_subcommand_prints_usage_and_fails() -> None:
    result = runner.invoke(app, ["deploy"])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert full_usage() in result.output


@pytest.mark.parametrize("args", [["--bogus"], ["--bogus", "fetch"]])
def test_unknown_global_option_prints_usage_and_fails(args: list[str]) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert full_usage() in result.output


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_invalid_workspace(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--workspace", str(tmp_path / "missing"), "clean"])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_broken_config_is_environment_error(tmp_path: Path) -> None:
    (tmp_path / "tspatcher.toml").write_text("[paths\n")

    result = runner.invoke(app, ["--workspace", str(tmp_path), "clean"])

    assert result.exit_code == int(ErrorCode.ENV_ERROR)


def test_clean_removes_checkout(tmp_path: Path) -> None:
    (tmp_path / "TypeScript" / "src").mkdir(parents=True)

    result = runner.invoke(app, ["--workspace", str(tmp_path), "clean"])

    assert result.exit_code == 0
    assert not (tmp_path / "TypeScript").exists()


def test_clean_without_checkout(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--workspace", str(tmp_path), "clean"])

    assert result.exit_code == 0
    assert "Nothing to clean" in result.output


def test_subcommand_usage_lookup() -> None:
    assert subcommand_usage(None) == full_usage()
    assert subcommand_usage("nope") == full_usage()
    assert subcommand_usage("build") == SUBCOMMAND_USAGE["build"]
