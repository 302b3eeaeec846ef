"""Values every command shares.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h`` as an alias of ``--help``.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` -
      character budgets for unhandled-error output.
    * :data:`SUCCESS_MESSAGE` / :data:`FAILURE_MESSAGE` - the fixed lines
      mail commands print for a delivered or undelivered message.
    * :data:`DEVELOPMENT_MODE_ENV` - re-raise unexpected mail errors when set.
"""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

SUCCESS_MESSAGE: Final[str] = "Email sent."
FAILURE_MESSAGE: Final[str] = "Error: Email not sent."

DEVELOPMENT_MODE_ENV: Final[str] = "DEVELOPMENT_MODE"

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "DEVELOPMENT_MODE_ENV",
    "FAILURE_MESSAGE",
    "SUCCESS_MESSAGE",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
