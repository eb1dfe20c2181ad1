"""Build service: run the upstream TypeScript build inside the Cloned Tree.

Steps, strictly in order, each must exit zero before the next starts:
1. `corepack npm ci`
2. `corepack npx hereby configure-nightly` (only for dev builds)
3. `corepack npx hereby LKG`
"""

from __future__ import annotations

from tspatcher.core.result import Err, Ok, Result
from tspatcher.output.console import Style
from tspatcher.platform.process import format_command, run_silent

from .base import BaseService
from .errors import CheckoutMissing, RunError, StepFailed

INSTALL_STEP = ("corepack", "npm", "ci")
NIGHTLY_CONFIG_STEP = ("corepack", "npx", "hereby", "configure-nightly")
LKG_STEP = ("corepack", "npx", "hereby", "LKG")


def build_steps(*, dev: bool) -> list[tuple[str, ...]]:
    steps: list[tuple[str, ...]] = [INSTALL_STEP]
    if dev:
        steps.append(NIGHTLY_CONFIG_STEP)
    steps.append(LKG_STEP)
    return steps


class BuildService(BaseService):
    """Build the patched compiler package."""

    def build(self, *, dev: bool = False, dry_run: bool = False) -> Result[None, RunError]:
        """Run the build steps from within the checkout.

        A failing step stops the chain; earlier steps are not undone.
        """
        checkout = self._workspace.checkout_dir
        if not self._workspace.has_checkout():
            return Err(CheckoutMissing(path=checkout))

        for step in build_steps(dev=dev):
            self._console.print(format_command(step), Style.DIM)
            if dry_run:
                continue
            result = run_silent(list(step), cwd=checkout)
            if isinstance(result, Err):
                return Err(StepFailed(command=step, returncode=result.error.returncode))

        return Ok(None)
