from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ResolutionFailed:
    """Release metadata could not be turned into a tag."""

    url: str
    reason: str


@dataclass(frozen=True, slots=True)
class CloneFailed:
    dest: Path
    returncode: int
    dest_occupied: bool = False


@dataclass(frozen=True, slots=True)
class CheckoutMissing:
    path: Path
    hint: str = "Run: tspatcher fetch"


@dataclass(frozen=True, slots=True)
class PatchTargetMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class DescriptorInvalid:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class PatchIOFailed:
    """A patch target could not be read or written back."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class StepFailed:
    """An external build or publish step exited non-zero."""

    command: tuple[str, ...]
    returncode: int


@dataclass(frozen=True, slots=True)
class CleanFailed:
    path: Path
    reason: str


FetchError = ResolutionFailed | CloneFailed

PatchError = PatchTargetMissing | DescriptorInvalid | PatchIOFailed

RunError = CheckoutMissing | StepFailed

ServiceError = FetchError | PatchError | RunError | CleanFailed
