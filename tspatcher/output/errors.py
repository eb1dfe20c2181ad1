"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tspatcher.core.errors import ErrorCode
from tspatcher.output.console import Style
from tspatcher.platform.process import format_command
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

if TYPE_CHECKING:
    from tspatcher.output.console import ConsoleProtocol

__all__ = ["print_service_error", "service_error_exit_code"]


def print_service_error(error: ServiceError, console: ConsoleProtocol) -> None:
    """Print a service error to the console with appropriate formatting."""
    match error:
        case ResolutionFailed(reason=reason):
            console.error(f"could not resolve release: {reason}")
        case CloneFailed(dest=dest, returncode=rc, dest_occupied=occupied):
            console.error(f"git clone failed (exit {rc})")
            if occupied:
                console.print(f"hint: {dest} already exists. Run: tspatcher clean", Style.DIM)
        case CheckoutMissing(path=path, hint=hint):
            console.error(f"checkout not found: {path}")
            console.print(f"hint: {hint}", Style.DIM)
        case PatchTargetMissing(path=path):
            console.error(f"patch target not found: {path}")
            console.print("hint: Run: tspatcher fetch", Style.DIM)
        case DescriptorInvalid(path=path, reason=reason):
            console.error(f"invalid package descriptor: {path} ({reason})")
        case PatchIOFailed(path=path, reason=reason):
            console.error(f"could not patch {path}: {reason}")
        case StepFailed(command=command, returncode=rc):
            console.error(f"{format_command(command)} failed (exit {rc})")
        case CleanFailed(path=path, reason=reason):
            console.error(f"could not remove {path}: {reason}")


def service_error_exit_code(error: ServiceError) -> int:
    """Get exit code for a service error."""
    match error:
        case ResolutionFailed():
            return int(ErrorCode.NETWORK_ERROR)
        case CloneFailed() | StepFailed():
            return int(ErrorCode.PROCESS_ERROR)
        case CheckoutMissing():
            return int(ErrorCode.ENV_ERROR)
        case PatchTargetMissing() | DescriptorInvalid() | PatchIOFailed() | CleanFailed():
            return int(ErrorCode.IO_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
