"""Tests for BuildService step ordering."""

from __future__ import annotations

from pathlib import Path

import pytest

from tspatcher.core.result import Err, Ok, Result
from tspatcher.core.workspace import Workspace
from tspatcher.output.console import MockConsole
from tspatcher.platform.process import ProcessError
from tspatcher.services.build import (
    INSTALL_STEP,
    LKG_STEP,
    NIGHTLY_CONFIG_STEP,
    BuildService,
    build_steps,
)
from tspatcher.services.errors import CheckoutMissing, StepFailed


def _fake_run(
    monkeypatch: pytest.MonkeyPatch, *, fail_on: tuple[str, ...] | None = None
) -> list[tuple[tuple[str, ...], Path]]:
    import tspatcher.services.build as build_mod

    calls: list[tuple[tuple[str, ...], Path]] = []

    def fake_run_silent(
        cmd: list[str], cwd: Path, env: dict[str, str] | None = None
    ) -> Result[None, ProcessError]:
        calls.append((tuple(cmd), cwd))
        if fail_on is not None and tuple(cmd) == fail_on:
            return Err(ProcessError(command=tuple(cmd), returncode=1))
        return Ok(None)

    monkeypatch.setattr(build_mod, "run_silent", fake_run_silent)
    return calls


def _workspace(tmp_path: Path) -> Workspace:
    ws = Workspace(root=tmp_path)
    ws.checkout_dir.mkdir()
    return ws


def test_build_steps() -> None:
    assert build_steps(dev=False) == [INSTALL_STEP, LKG_STEP]
    assert build_steps(dev=True) == [INSTALL_STEP, NIGHTLY_CONFIG_STEP, LKG_STEP]


def test_release_build_never_configures_nightly(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = _fake_run(monkeypatch)
    ws = _workspace(tmp_path)

    assert BuildService(workspace=ws, console=MockConsole()).build() == Ok(None)

    assert [c for c, _ in calls] == [
        ("corepack", "npm", "ci"),
        ("corepack", "npx", "hereby", "LKG"),
    ]
    assert all(cwd == ws.checkout_dir for _, cwd in calls)


def test_dev_build_configures_between_install_and_build(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = _fake_run(monkeypatch)
    ws = _workspace(tmp_path)

    BuildService(workspace=ws, console=MockConsole()).build(dev=True)

    assert [c for c, _ in calls] == [
        ("corepack", "npm", "ci"),
        ("corepack", "npx", "hereby", "configure-nightly"),
        ("corepack", "npx", "hereby", "LKG"),
    ]


def test_failing_step_stops_chain(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_run(monkeypatch, fail_on=INSTALL_STEP)
    ws = _workspace(tmp_path)

    result = BuildService(workspace=ws, console=MockConsole()).build(dev=True)

    assert result == Err(StepFailed(command=INSTALL_STEP, returncode=1))
    assert [c for c, _ in calls] == [INSTALL_STEP]


def test_missing_checkout(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_run(monkeypatch)
    ws = Workspace(root=tmp_path)

    result = BuildService(workspace=ws, console=MockConsole()).build()

    assert result == Err(CheckoutMissing(path=ws.checkout_dir))
    assert calls == []


def test_dry_run_prints_without_running(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_run(monkeypatch)
    console = MockConsole()

    BuildService(workspace=_workspace(tmp_path), console=console).build(dev=True, dry_run=True)

    assert calls == []
    assert console.messages == [
        "corepack npm ci",
        "corepack npx hereby configure-nightly",
        "corepack npx hereby LKG",
    ]
