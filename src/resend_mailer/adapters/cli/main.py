"""Process entry for the ``resend-mailer`` command.

Runs the Click group in non-standalone mode so the exit code comes back as
a return value, formats unexpected errors through lib_cli_exit_tools and
shuts the lib_log_rich runtime down on the way out.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_log_rich.runtime

from resend_mailer import __init__conf__

from .tracebacks import report_unhandled, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from resend_mailer.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]


def _invoke(argv: Sequence[str] | None, services_factory: ServicesFactory) -> int:
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        # The services factory rides on ``obj``; lib_cli_exit_tools.run_cli has no way to pass it.
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt included
        return report_unhandled(exc)
    return 0


def _shutdown_logging() -> None:
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: ServicesFactory | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Returns the AppServices; callers outside the
            adapters layer pass ``build_production``.

    Raises:
        ValueError: When *services_factory* is missing.

    Example:
        >>> from resend_mailer.composition import build_production
        >>> main(["--help"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
