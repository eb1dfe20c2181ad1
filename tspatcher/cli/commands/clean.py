"""Clean command - delete the checkout."""

from __future__ import annotations

from tspatcher.cli.commands._helpers import exit_on_error
from tspatcher.cli.context import build_context
from tspatcher.output.console import Style
from tspatcher.services.clean import CleanService


def clean() -> None:
    """Delete the TypeScript folder."""
    ctx = build_context()
    result = CleanService(workspace=ctx.workspace, console=ctx.console).clean()
    exit_on_error(result, ctx)
    if not result.unwrap_or(False):
        ctx.console.print("Nothing to clean", Style.DIM)
