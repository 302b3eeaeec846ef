"""Logging adapter that leaves the lib_log_rich runtime untouched."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Skip runtime initialization; stdlib loggers keep their default handlers."""


__all__ = ["init_logging_in_memory"]
