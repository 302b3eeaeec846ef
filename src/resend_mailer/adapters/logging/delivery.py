"""Delivery log sink written to by mail transports.

The sink is the stdlib logger ``resend_mailer.delivery``. Records reach
lib_log_rich through the std-logging bridge like every other module logger;
when ``resend.log_file`` is configured they are also appended to that file.
Callers may attach further handlers of their own.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

DELIVERY_LOGGER_NAME = "resend_mailer.delivery"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    # FileHandler stores abspath without resolving symlinks.
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target for handler in logger.handlers
    )


def build_delivery_log_sink(
    log_file: Path | None = None,
    handlers: Sequence[logging.Handler] = (),
) -> logging.Logger:
    """Return the delivery logger, attaching the requested handlers once.

    Repeated calls with the same arguments leave the logger unchanged.

    Args:
        log_file: Append-only log file; parent directories are created.
        handlers: Additional handlers to attach.

    Returns:
        The shared ``resend_mailer.delivery`` logger.

    Example:
        >>> build_delivery_log_sink().name
        'resend_mailer.delivery'
    """
    logger = logging.getLogger(DELIVERY_LOGGER_NAME)
    if log_file is not None and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger


__all__ = ["DELIVERY_LOGGER_NAME", "build_delivery_log_sink"]
