"""Subprocess execution with Result-based error handling.

The external steps this tool drives (git clone, npm ci, hereby, npm
publish) are long-running and chatty, so their output is streamed to the
terminal untouched. Only the exit status is inspected.

Usage:
    match run_silent(["corepack", "npm", "ci"], cwd=checkout):
        case Ok(_):
            pass
        case Err(error):
            print(f"install failed: {error}")
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from tspatcher.core.result import Err, Ok, Result

__all__ = ["ProcessError", "format_command", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be launched or exited non-zero.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process never started.
        stderr: Launch error details (empty when output was streamed).
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def format_command(cmd: list[str] | tuple[str, ...]) -> str:
    """Render a command as a copy-pasteable shell line."""
    return shlex.join(cmd)


def _executable(cmd: list[str]) -> list[str]:
    # On Windows corepack/npm are .cmd shims that CreateProcess cannot find by bare name.
    found = shutil.which(cmd[0])
    if found is None:
        return cmd
    return [found, *cmd[1:]]


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command, letting its output stream to the terminal.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(None) on exit status zero, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            _executable(cmd),
            cwd=str(cwd),
            env=env,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
