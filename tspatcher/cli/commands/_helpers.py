"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from tspatcher.core.result import Err, Result
from tspatcher.output.errors import print_service_error, service_error_exit_code
from tspatcher.services.errors import ServiceError

if TYPE_CHECKING:
    from tspatcher.cli.context import CLIContext

T = TypeVar("T")


def exit_on_error(result: Result[T, ServiceError], ctx: CLIContext) -> None:
    """Report an Err and exit with its mapped code; return silently on Ok.

    Replaces the per-command boilerplate:
        match result:
            case Err(e):
                print_service_error(e, ctx.console)
                raise typer.Exit(code=service_error_exit_code(e))
            case Ok(_):
                pass
    """
    if isinstance(result, Err):
        print_service_error(result.error, ctx.console)
        raise typer.Exit(code=service_error_exit_code(result.error))
