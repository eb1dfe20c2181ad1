"""Tests for tspatcher.output.console."""

from __future__ import annotations

import pytest

from tspatcher.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


def _report(console: ConsoleProtocol) -> None:
    console.print("Will clone TypeScript version: v5.6.3")
    console.print("git clone --depth=1", Style.DIM)
    console.warning("no instantiationDepth limit found")
    console.error("git clone failed (exit 128)")
    console.success("cloned")


class TestMockConsole:
    def test_records_styles(self) -> None:
        console = MockConsole()
        _report(console)

        assert [o.style for o in console.outputs] == [
            Style.DEFAULT,
            Style.DIM,
            Style.WARNING,
            Style.ERROR,
            Style.SUCCESS,
        ]
        assert console.messages[3] == "error: git clone failed (exit 128)"
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        _report(console)
        assert len(console.find("git clone")) == 2

    def test_text(self) -> None:
        console = MockConsole()
        console.print("a")
        console.print("b", Style.DIM)
        assert console.text == "a\nb"


class TestRichConsole:
    def test_prints_plain_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("Changing package name to: [my-ts]")
        console.error("boom")

        out = capsys.readouterr().out
        assert "Changing package name to: [my-ts]" in out
        assert "error: boom" in out


def test_style_str() -> None:
    assert str(Style.WARNING) == "warning"
