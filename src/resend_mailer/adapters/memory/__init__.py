"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.email` - Send API spy, recording transport and log sink
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import config_in_memory, display_config_in_memory, get_config_in_memory
from .email import MailerSpy, RecordingLogSink, RecordingTransport, ResendApiSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from resend_mailer.application.ports import (
        BuildMailer,
        GetConfig,
        InitLogging,
        LogSink,
        MailTransport,
        SendApi,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_build_mailer: BuildMailer = MailerSpy().build_mailer
    _assert_send_api: SendApi = ResendApiSpy()
    _assert_log_sink: LogSink = RecordingLogSink()
    _assert_transport: MailTransport = RecordingTransport()

__all__ = [
    "MailerSpy",
    "RecordingLogSink",
    "RecordingTransport",
    "ResendApiSpy",
    "config_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
