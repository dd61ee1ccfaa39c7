"""Process exit codes of the cl10 command line."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status per failure category, so scripts can branch on them."""

    OK = 0
    GENERIC = 1
    BAD_ARGS = 2
    NOT_RUNNING = 3
    TIMEOUT = 4
    UNSUPPORTED = 5
