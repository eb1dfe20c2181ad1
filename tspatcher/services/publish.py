"""Publish service: `npm publish` the built package.

Publishing is never retried: npm versions are append-only, so a second
attempt after an ambiguous failure is a decision for the user.
"""

from __future__ import annotations

from tspatcher.core.result import Err, Ok, Result
from tspatcher.output.console import Style
from tspatcher.platform.process import format_command, run_silent

from .base import BaseService
from .errors import CheckoutMissing, RunError, StepFailed

PUBLISH_STEP = ("corepack", "npm", "publish")


def publish_command(otp: str | None = None) -> list[str]:
    cmd = list(PUBLISH_STEP)
    if otp:
        cmd.extend(["--otp", otp])
    return cmd


class PublishService(BaseService):
    def publish(self, *, otp: str | None = None, dry_run: bool = False) -> Result[None, RunError]:
        checkout = self._workspace.checkout_dir
        if not self._workspace.has_checkout():
            return Err(CheckoutMissing(path=checkout))

        cmd = publish_command(otp)
        shown = publish_command("******" if otp else None)
        self._console.print(format_command(shown), Style.DIM)
        if dry_run:
            return Ok(None)

        result = run_silent(cmd, cwd=checkout)
        if isinstance(result, Err):
            return Err(StepFailed(command=tuple(shown), returncode=result.error.returncode))
        return Ok(None)
