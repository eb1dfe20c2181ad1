from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from tspatcher.core.config import load_config_or_default
from tspatcher.core.errors import ErrorCode
from tspatcher.core.result import Err
from tspatcher.core.workspace import Workspace, resolve_workspace
from tspatcher.net.http import HttpClient, RealHttpClient
from tspatcher.output.console import ConsoleProtocol, RichConsole

_workspace_override: Path | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace
    console: ConsoleProtocol
    http: HttpClient


def set_workspace_override(root: Path | None) -> None:
    """Record the --workspace root for commands run in this process."""
    global _workspace_override
    _workspace_override = root


def build_context() -> CLIContext:
    root_result = resolve_workspace(_workspace_override)
    if isinstance(root_result, Err):
        typer.echo(f"error: {root_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    root = root_result.value

    config_result = load_config_or_default(Workspace(root=root).config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        workspace=Workspace(root=root, config=config_result.value),
        console=RichConsole(),
        http=RealHttpClient(),
    )
