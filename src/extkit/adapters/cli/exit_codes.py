"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by an extkit command carries one of these
values. Signal codes (130, 141, 143) are informational only; the
application never raises them itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions:

    * 0–1: generic success / failure
    * 2, 13, 21: errno-derived (ENOENT, EACCES, EISDIR)
    * 22: EINVAL
    * 65: EX_DATAERR (input is not valid UTF-8 text)
    * 69: EX_UNAVAILABLE (required external tool missing)
    * 78: EX_CONFIG
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.TOOL_UNAVAILABLE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    IS_A_DIRECTORY = 21
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    TOOL_UNAVAILABLE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
