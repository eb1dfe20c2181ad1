"""Publish command - npm publish the built package."""

from __future__ import annotations

import typer

from tspatcher.cli.commands._helpers import exit_on_error
from tspatcher.cli.context import build_context
from tspatcher.services.publish import PublishService


def publish(
    otp: str | None = typer.Option(
        None, "--otp", help="NPM one-time password (two-factor auth)", show_default=False
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command without running it"),
) -> None:
    """Publish the patched TS package to NPM."""
    ctx = build_context()
    svc = PublishService(workspace=ctx.workspace, console=ctx.console)
    exit_on_error(svc.publish(otp=otp, dry_run=dry_run), ctx)
    if not dry_run:
        ctx.console.success("published")
