"""Fetch service: resolve a Revision Selector and clone the upstream repo."""

from __future__ import annotations

from tspatcher.core.result import Err, Ok, Result
from tspatcher.core.revision import (
    DevelopmentHead,
    ExplicitRevision,
    LatestPrerelease,
    LatestStable,
    RevisionSelector,
)
from tspatcher.core.workspace import Workspace
from tspatcher.git.clone import shallow_clone
from tspatcher.net.github import latest_release_tag, newest_release_tag
from tspatcher.net.http import HttpClient
from tspatcher.output.console import ConsoleProtocol

from .base import BaseService
from .errors import CloneFailed, FetchError, ResolutionFailed


class FetchService(BaseService):
    """Clone the compiler sources at the revision a selector names.

    Policy:
    - At most one GitHub API call per fetch, never retried.
    - Always `--depth=1`.
    - An existing checkout is never merged into or replaced.
    """

    def __init__(
        self,
        *,
        workspace: Workspace,
        console: ConsoleProtocol,
        http: HttpClient,
    ) -> None:
        super().__init__(workspace=workspace, console=console)
        self._http = http

    def resolve(self, selector: RevisionSelector) -> Result[str | None, ResolutionFailed]:
        """Turn a selector into the `--branch` value, or None for the default branch tip."""
        upstream = self._workspace.config.upstream

        match selector:
            case ExplicitRevision(name=name):
                return Ok(name)
            case DevelopmentHead():
                return Ok(None)
            case LatestStable():
                result = latest_release_tag(self._http, upstream.repo, api_url=upstream.api_url)
            case LatestPrerelease():
                result = newest_release_tag(self._http, upstream.repo, api_url=upstream.api_url)

        match result:
            case Ok(tag):
                return Ok(tag)
            case Err(e):
                return Err(ResolutionFailed(url=e.url, reason=str(e)))

    def fetch(self, selector: RevisionSelector) -> Result[str | None, FetchError]:
        """Resolve the revision, announce it, and clone.

        Returns:
            Ok(revision) with the branch/tag cloned (None for default branch tip)
            Err(FetchError) on failure
        """
        resolved = self.resolve(selector)
        if isinstance(resolved, Err):
            return resolved
        revision = resolved.value

        if revision is not None:
            self._console.print(f"Will clone TypeScript version: {revision}")
        else:
            self._console.print("Will clone the latest commit.")

        ws = self._workspace
        dest = ws.checkout_dir
        occupied = dest.is_dir() and any(dest.iterdir())

        clone = shallow_clone(
            ws.config.upstream.clone_url,
            dest,
            cwd=ws.root,
            branch=revision,
        )
        if isinstance(clone, Err):
            return Err(
                CloneFailed(
                    dest=dest,
                    returncode=clone.error.returncode,
                    dest_occupied=occupied,
                )
            )

        return Ok(revision)
