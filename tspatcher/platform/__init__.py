"""Platform abstraction layer."""

from .files import atomic_write_text, remove_readonly
from .process import ProcessError, format_command, run_silent

__all__ = [
    # files
    "atomic_write_text",
    "remove_readonly",
    # process
    "ProcessError",
    "format_command",
    "run_silent",
]
