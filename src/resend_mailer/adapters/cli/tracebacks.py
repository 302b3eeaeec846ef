"""Traceback switches shared with lib_cli_exit_tools.

``--traceback`` flips two flags on ``lib_cli_exit_tools.config``; the entry
point snapshots them before a run and puts them back afterwards so an
embedding process (or the test suite) sees no lasting change.
"""

from __future__ import annotations

from typing import NamedTuple

import lib_cli_exit_tools

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT


class TracebackState(NamedTuple):
    """Captured ``(traceback, traceback_force_color)`` flags."""

    enabled: bool
    force_color: bool


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(not before.enabled)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


def report_unhandled(exc: BaseException) -> int:
    """Print *exc* the lib_cli_exit_tools way and return its exit code.

    The full traceback is shown only when ``--traceback`` is active; otherwise
    the message is cut to :data:`TRACEBACK_SUMMARY_LIMIT` characters.
    """
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "report_unhandled",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
