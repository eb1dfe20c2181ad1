"""Process exit codes.

Every command maps its failure to one of these values so that scripts
driving the tool (CI jobs, release checklists) can tell a bad flag apart
from a failed `npm publish`.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    The numeric values are part of the CLI contract:
    - 0: Success
    - 1: User error (unknown subcommand, invalid flag value)
    - 2: Environment error (no checkout yet, invalid config file)
    - 3: Process error (git clone, npm or hereby exited non-zero)
    - 4: Network error (release metadata unavailable)
    - 5: I/O error (patch target missing, unreadable package.json)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PROCESS_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
