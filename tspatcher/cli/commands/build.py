"""Build command - run the upstream build inside the checkout."""

from __future__ import annotations

import typer

from tspatcher.cli.commands._helpers import exit_on_error
from tspatcher.cli.context import build_context
from tspatcher.services.build import BuildService


def build(
    dev: bool = typer.Option(
        False, "--dev", help="Configure a nightly build; needed for non-release versions"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print steps without running them"),
) -> None:
    """Build the patched TypeScript."""
    ctx = build_context()
    svc = BuildService(workspace=ctx.workspace, console=ctx.console)
    exit_on_error(svc.build(dev=dev, dry_run=dry_run), ctx)
    if not dry_run:
        ctx.console.success("build finished")
