from __future__ import annotations

from pathlib import Path

import click
import typer
from typer.core import TyperGroup

from tspatcher import __version__
from tspatcher.cli.commands.build import build
from tspatcher.cli.commands.clean import clean
from tspatcher.cli.commands.fetch import fetch
from tspatcher.cli.commands.help_cmd import help_
from tspatcher.cli.commands.patch import PatchCommand, patch
from tspatcher.cli.commands.publish import publish
from tspatcher.cli.context import set_workspace_override
from tspatcher.cli.usage import full_usage
from tspatcher.core.errors import ErrorCode
from tspatcher.core.result import Err
from tspatcher.core.workspace import resolve_workspace


class Dispatcher(TyperGroup):
    """Prints the full usage and exits 1 for an unknown subcommand or global option."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption:
            typer.echo(full_usage())
            ctx.exit(int(ErrorCode.USER_ERROR))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        name = args[0] if args else ""
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            typer.echo(full_usage())
            ctx.exit(int(ErrorCode.USER_ERROR))
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=Dispatcher,
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(fetch)
app.command(cls=PatchCommand)(patch)
app.command()(build)
app.command()(publish)
app.command()(clean)
app.command("help")(help_)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    workspace: Path | None = typer.Option(
        None,
        "--workspace",
        help="Directory holding the TypeScript checkout (default: current dir)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(full_usage())
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if workspace is not None:
        root = resolve_workspace(workspace)
        if isinstance(root, Err):
            typer.echo(f"error: invalid --workspace: {root.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        set_workspace_override(root.value)
    else:
        set_workspace_override(None)


def main() -> None:
    app()
