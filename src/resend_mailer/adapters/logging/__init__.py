"""Logging adapter - lib_log_rich setup and the delivery log sink.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.delivery.build_delivery_log_sink` - Logger transports report errors to
"""

from __future__ import annotations

from .delivery import DELIVERY_LOGGER_NAME, build_delivery_log_sink
from .setup import init_logging

__all__ = ["DELIVERY_LOGGER_NAME", "build_delivery_log_sink", "init_logging"]
