"""Git operations."""

from .clone import GitError, clone_command, shallow_clone

__all__ = ["GitError", "clone_command", "shallow_clone"]
