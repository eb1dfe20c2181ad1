"""Fetch command - clone the upstream TypeScript repository."""

from __future__ import annotations

import typer

from tspatcher.cli.commands._helpers import exit_on_error
from tspatcher.cli.context import build_context
from tspatcher.core.revision import select_revision
from tspatcher.services.fetch import FetchService


def fetch(
    branch: str | None = typer.Option(
        None, "--branch", help="Clone a specific branch or tag", show_default=False
    ),
    stable: bool = typer.Option(False, "--stable", help="Clone the latest stable release (default)"),
    prerelease: bool = typer.Option(
        False, "--prerelease", help="Clone the newest release, stable or not"
    ),
    dev: bool = typer.Option(False, "--dev", help="Clone the latest commit on the default branch"),
) -> None:
    """Clone the remote TypeScript repository."""
    ctx = build_context()
    selector = select_revision(branch=branch, stable=stable, prerelease=prerelease, dev=dev)

    svc = FetchService(workspace=ctx.workspace, console=ctx.console, http=ctx.http)
    exit_on_error(svc.fetch(selector), ctx)
    ctx.console.success(f"cloned into {ctx.workspace.checkout_dir}")
