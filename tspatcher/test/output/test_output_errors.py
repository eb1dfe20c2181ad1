"""Tests for error presentation and exit codes."""

from __future__ import annotations

from pathlib import Path

import pytest

from tspatcher.core.errors import ErrorCode
from tspatcher.output.console import MockConsole, Style
from tspatcher.output.errors import print_service_error, service_error_exit_code
from tspatcher.services.errors import (
    CheckoutMissing,
    CleanFailed,
    CloneFailed,
    DescriptorInvalid,
    PatchIOFailed,
    PatchTargetMissing,
    ResolutionFailed,
    ServiceError,
    StepFailed,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ResolutionFailed(url="u", reason="HTTP 403"), ErrorCode.NETWORK_ERROR),
        (CloneFailed(dest=Path("TypeScript"), returncode=128), ErrorCode.PROCESS_ERROR),
        (StepFailed(command=("corepack", "npm", "ci"), returncode=1), ErrorCode.PROCESS_ERROR),
        (CheckoutMissing(path=Path("TypeScript")), ErrorCode.ENV_ERROR),
        (PatchTargetMissing(path=Path("checker.ts")), ErrorCode.IO_ERROR),
        (DescriptorInvalid(path=Path("package.json"), reason="bad"), ErrorCode.IO_ERROR),
        (PatchIOFailed(path=Path("checker.ts"), reason="denied"), ErrorCode.IO_ERROR),
        (CleanFailed(path=Path("TypeScript"), reason="busy"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: ServiceError, code: ErrorCode) -> None:
    assert service_error_exit_code(error) == int(code)


def test_clone_failure_hints_clean_when_occupied() -> None:
    console = MockConsole()

    print_service_error(
        CloneFailed(dest=Path("TypeScript"), returncode=128, dest_occupied=True), console
    )

    assert console.messages[0] == "error: git clone failed (exit 128)"
    assert console.outputs[1].style == Style.DIM
    assert "tspatcher clean" in console.messages[1]


def test_clone_failure_without_hint() -> None:
    console = MockConsole()
    print_service_error(CloneFailed(dest=Path("TypeScript"), returncode=128), console)
    assert len(console.outputs) == 1


def test_step_failure_shows_command() -> None:
    console = MockConsole()

    print_service_error(
        StepFailed(command=("corepack", "npx", "hereby", "LKG"), returncode=2), console
    )

    assert console.messages == ["error: corepack npx hereby LKG failed (exit 2)"]


def test_error_code_str() -> None:
    assert str(ErrorCode.PROCESS_ERROR) == "process error"


def test_patch_io_failure_names_the_file() -> None:
    console = MockConsole()

    print_service_error(PatchIOFailed(path=Path("checker.ts"), reason="not valid UTF-8"), console)

    assert console.messages == ["error: could not patch checker.ts: not valid UTF-8"]
