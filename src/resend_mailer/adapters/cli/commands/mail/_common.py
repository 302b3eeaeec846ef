"""Shared utilities for mail CLI commands.

Contains the error handling shared between send-test and send-email: every
failure a Mailer can surface maps to one :class:`ExitCode`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

import rich_click as click

from resend_mailer.domain.errors import ConfigurationError, SendFailedError

from ...constants import DEVELOPMENT_MODE_ENV, FAILURE_MESSAGE, SUCCESS_MESSAGE
from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def execute_with_mail_error_handling(
    *,
    operation: Callable[[], bool],
    recipients: list[str],
) -> None:
    """Run a send operation and translate its outcome into output and exit codes.

    Exceptions are caught most specific first:

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. ValueError (invalid recipient) -> INVALID_ARGUMENT (22)
    3. FileNotFoundError (missing attachment) -> FILE_NOT_FOUND (2)
    4. SendFailedError / RuntimeError -> SEND_FAILURE (69)
    5. Exception -> GENERAL_ERROR (1), logged with traceback

    A ``False`` result from *operation* prints ``Error: Email not sent.`` and
    exits with SEND_FAILURE.

    Development Mode:
        Set the DEVELOPMENT_MODE environment variable to re-raise unexpected
        exceptions instead of catching them.

    Raises:
        SystemExit: On any failure.
    """
    try:
        delivered = operation()
    except ConfigurationError as exc:
        _handle_send_error(exc, "Mail configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    except ValueError as exc:
        _handle_send_error(exc, "Invalid mail parameters", "Invalid mail parameters", exit_code=ExitCode.INVALID_ARGUMENT)
    except FileNotFoundError as exc:
        _handle_send_error(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except (SendFailedError, RuntimeError) as exc:
        _handle_send_error(exc, "Mail delivery failed", "Failed to send email", exit_code=ExitCode.SEND_FAILURE)
    except Exception as exc:
        if os.environ.get(DEVELOPMENT_MODE_ENV):
            raise
        _handle_send_error(
            exc,
            "Unexpected error sending mail",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )
    else:
        _handle_send_result(delivered, recipients)


def _handle_send_result(delivered: bool, recipients: list[str]) -> None:
    if delivered:
        click.echo(SUCCESS_MESSAGE)
        logger.info("Email sent via CLI", extra={"recipients": recipients})
        return
    click.echo(FAILURE_MESSAGE, err=True)
    raise SystemExit(ExitCode.SEND_FAILURE)


def _handle_send_error(
    exc: Exception,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> None:
    """Log *exc*, print a one-line error and exit with *exit_code*.

    Raises:
        SystemExit: Always.
    """
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


__all__ = ["execute_with_mail_error_handling"]
