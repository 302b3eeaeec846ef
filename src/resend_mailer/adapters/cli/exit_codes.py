"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values
instead of a bare ``1``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions where applicable.

    * 0-1: generic success / failure
    * 2: ENOENT (attachment not found)
    * 22: EINVAL
    * 69: EX_UNAVAILABLE (the mail was not delivered)
    * 78: EX_CONFIG

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.SEND_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    SEND_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
