"""Exit codes for the gitstat CLI.

Every failure the CLI can report maps onto one of these codes. The values
are process exit codes and should remain stable for scripts that check them.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the gitstat command.

    - 0: Success (including "not inside a repository")
    - 2: Usage error (unknown option, missing value); raised by typer itself
    - 3: Parse error (status report did not match the porcelain v2 grammar)
    - 4: Environment error (git missing or failing)
    - 5: I/O error (operation marker file missing or unreadable)
    """

    OK = 0
    USAGE_ERROR = 2
    PARSE_ERROR = 3
    ENV_ERROR = 4
    IO_ERROR = 5
