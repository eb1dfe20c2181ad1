from __future__ import annotations

from tspatcher.core.workspace import Workspace
from tspatcher.output.console import ConsoleProtocol


class BaseService:
    """Shared state for services acting on one workspace."""

    def __init__(self, *, workspace: Workspace, console: ConsoleProtocol) -> None:
        self._workspace = workspace
        self._console = console
