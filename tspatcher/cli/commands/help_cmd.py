"""Help command - usage for one subcommand, or for all of them."""

from __future__ import annotations

import typer

from tspatcher.cli.usage import subcommand_usage


def help_(
    subcommand: str | None = typer.Argument(None, help="Subcommand to describe"),
) -> None:
    """Show subcommand usage."""
    typer.echo(subcommand_usage(subcommand))
