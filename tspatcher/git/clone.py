"""Shallow git clone.

Usage:
    match shallow_clone(url, Path("TypeScript"), cwd=root, branch="v5.6.2"):
        case Ok(_):
            print("cloned")
        case Err(e):
            print(f"clone failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tspatcher.core.result import Err, Ok, Result
from tspatcher.platform.process import run_silent as run_process

__all__ = ["GitError", "clone_command", "shallow_clone"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def clone_command(url: str, dest: Path, branch: str | None = None) -> list[str]:
    """Build the `git clone --depth=1` argv, with `--branch` only if given."""
    cmd = ["git", "clone", "--depth=1"]
    if branch is not None:
        cmd.extend(["--branch", branch])
    cmd.extend([url, str(dest)])
    return cmd


def shallow_clone(
    url: str,
    dest: Path,
    *,
    cwd: Path,
    branch: str | None = None,
) -> Result[None, GitError]:
    """Clone url into dest with depth 1.

    git refuses a non-empty destination; that failure is returned, not
    worked around.

    Args:
        url: Remote repository URL
        dest: Target directory (relative paths resolve against cwd)
        cwd: Directory git runs in
        branch: Branch or tag to check out; default branch tip if None
    """
    match run_process(clone_command(url, dest, branch), cwd=cwd):
        case Err(e):
            return Err(
                GitError(
                    command="clone",
                    message=e.stderr.strip() or str(e),
                    returncode=e.returncode,
                )
            )
        case Ok(_):
            return Ok(None)
