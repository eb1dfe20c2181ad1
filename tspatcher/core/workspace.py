"""Workspace root and the paths derived from it.

The workspace is the directory that holds the Cloned Tree (and, optionally,
`tspatcher.toml`). Components receive it explicitly instead of relying on
the process working directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import CONFIG_FILENAME, Config
from .result import Err, Ok, Result

__all__ = ["Workspace", "WorkspaceError", "resolve_workspace"]


@dataclass(frozen=True, slots=True)
class WorkspaceError:
    """Error when the requested workspace root is unusable."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A workspace root plus the config that lays out the Cloned Tree."""

    root: Path
    config: Config = field(default_factory=Config)

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    @property
    def checkout_dir(self) -> Path:
        """The Cloned Tree."""
        return self.root / self.config.paths.checkout

    @property
    def checker_path(self) -> Path:
        """Compiler source holding the instantiation depth constant."""
        return self.checkout_dir / self.config.paths.checker

    @property
    def package_json_path(self) -> Path:
        """The Package Descriptor."""
        return self.checkout_dir / self.config.paths.package

    def has_checkout(self) -> bool:
        return self.checkout_dir.is_dir()


def resolve_workspace(override: Path | None = None) -> Result[Path, WorkspaceError]:
    """Resolve the workspace root directory.

    Args:
        override: Explicit root (from --workspace); the current directory
            is used when None.

    Returns:
        Ok(absolute root) or Err(WorkspaceError) if it is not a directory.
    """
    candidate = override if override is not None else Path.cwd()
    try:
        root = candidate.expanduser().resolve()
    except OSError as e:
        return Err(WorkspaceError(f"invalid workspace path: {e}", path=candidate))

    if not root.is_dir():
        return Err(WorkspaceError(f"workspace is not a directory: {root}", path=root))
    return Ok(root)
