"""Tests for CleanService."""

from __future__ import annotations

from pathlib import Path

from tspatcher.core.result import Ok
from tspatcher.core.workspace import Workspace
from tspatcher.output.console import MockConsole
from tspatcher.services.clean import CleanService


def test_removes_checkout_recursively(tmp_path: Path) -> None:
    ws = Workspace(root=tmp_path)
    (ws.checkout_dir / ".git" / "objects").mkdir(parents=True)
    (ws.checkout_dir / ".git" / "objects" / "pack.idx").write_text("x")
    (tmp_path / "tspatcher.toml").write_text("")

    assert CleanService(workspace=ws, console=MockConsole()).clean() == Ok(True)

    assert not ws.checkout_dir.exists()
    assert (tmp_path / "tspatcher.toml").exists()


def test_nothing_to_clean(tmp_path: Path) -> None:
    console = MockConsole()

    assert CleanService(workspace=Workspace(root=tmp_path), console=console).clean() == Ok(False)
    assert console.outputs == []
