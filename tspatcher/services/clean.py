"""Clean service: delete the Cloned Tree."""

from __future__ import annotations

import shutil

from tspatcher.core.result import Err, Ok, Result
from tspatcher.platform.files import remove_readonly

from .base import BaseService
from .errors import CleanFailed


class CleanService(BaseService):
    def clean(self) -> Result[bool, CleanFailed]:
        """Remove the checkout recursively.

        Returns:
            Ok(True) if something was removed, Ok(False) if there was no checkout.
        """
        checkout = self._workspace.checkout_dir
        if not checkout.exists():
            return Ok(False)

        self._console.print(f"Removing {checkout}")
        try:
            if checkout.is_dir() and not checkout.is_symlink():
                shutil.rmtree(checkout, onexc=remove_readonly)
            else:
                checkout.unlink()
        except OSError as e:
            return Err(CleanFailed(path=checkout, reason=str(e)))
        return Ok(True)
