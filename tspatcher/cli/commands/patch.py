"""Patch command - edit package.json and the instantiation depth limit."""

from __future__ import annotations

import click
import typer
from typer.core import TyperCommand

from tspatcher.cli.commands._helpers import exit_on_error
from tspatcher.cli.context import build_context
from tspatcher.core.errors import ErrorCode
from tspatcher.output.console import Style
from tspatcher.services.patch import DescriptorChanges, PatchService

TYPE_DEPTH_FLAG = "--type-depth"
_USE_CONFIGURED_DEPTH = "default"


class PatchCommand(TyperCommand):
    """Lets `--type-depth` appear without a value.

    A bare `--type-depth` (last token, or followed by another option) is
    rewritten to `--type-depth=default` before click parses it.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        rewritten: list[str] = []
        for i, arg in enumerate(args):
            if arg == TYPE_DEPTH_FLAG:
                nxt = args[i + 1] if i + 1 < len(args) else None
                if nxt is None or nxt.startswith("-"):
                    rewritten.append(f"{TYPE_DEPTH_FLAG}={_USE_CONFIGURED_DEPTH}")
                    continue
            rewritten.append(arg)
        return super().parse_args(ctx, rewritten)


def parse_type_depth(value: str, default: int) -> int | None:
    """Parse a --type-depth value; None if it is not a positive integer."""
    if value == _USE_CONFIGURED_DEPTH:
        return default
    # int() would also take "1_000", "+5", " 50 " and non-ASCII digits
    if not (value.isascii() and value.isdecimal()):
        return None
    depth = int(value)
    return depth if depth > 0 else None


def patch(
    type_depth: str | None = typer.Option(
        None,
        TYPE_DEPTH_FLAG,
        metavar="[DEPTH]",
        help="Patch the maximum type instantiation depth (default 1000)",
        show_default=False,
    ),
    package_name: str | None = typer.Option(
        None,
        "--package-name",
        help="Set the name in package.json; necessary before publishing",
        show_default=False,
    ),
    package_make_public: bool = typer.Option(
        False,
        "--package-make-public",
        help="Make the package public to avoid NPM error 402",
    ),
) -> None:
    """Patch the cloned TS repo."""
    ctx = build_context()

    depth: int | None = None
    if type_depth is not None:
        depth = parse_type_depth(type_depth, ctx.workspace.config.patch.type_depth)
        if depth is None:
            ctx.console.error(f"{TYPE_DEPTH_FLAG} expects a positive integer, got {type_depth!r}")
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if package_name is not None and not package_name.strip():
        ctx.console.error("--package-name must not be empty")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    changes = DescriptorChanges(name=package_name, make_public=package_make_public)
    if changes.is_empty and depth is None:
        ctx.console.print("Nothing to patch", Style.DIM)
        ctx.console.print("hint: tspatcher help patch", Style.DIM)
        return

    svc = PatchService(workspace=ctx.workspace, console=ctx.console)
    if not changes.is_empty:
        exit_on_error(svc.patch_descriptor(changes), ctx)
    if depth is not None:
        exit_on_error(svc.patch_depth(depth), ctx)
