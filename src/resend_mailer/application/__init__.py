"""Application layer - the mail interface and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions and objects
    * :mod:`.mailer` - Generic mail interface with pre-delivery hooks
"""

from __future__ import annotations

from .mailer import DeliveryContext, MailFailure, Mailer, PreDeliveryHook
from .ports import (
    BuildMailer,
    DebugOutput,
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadResendConfig,
    LogSink,
    MailTransport,
    SendApi,
)

__all__ = [
    "BuildMailer",
    "DebugOutput",
    "DeliveryContext",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadResendConfig",
    "LogSink",
    "MailFailure",
    "MailTransport",
    "Mailer",
    "PreDeliveryHook",
    "SendApi",
]
