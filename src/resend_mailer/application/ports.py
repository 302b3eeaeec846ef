"""Application ports: Protocol definitions for adapter functions and objects.

Callable protocols define a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them via
structural subtyping (PEP 544). Object protocols describe the collaborators
a transport is built from.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``ResendConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.message import Message
from ..domain.results import SendResult

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import ResendConfig
    from .mailer import Mailer


DebugOutput = Callable[[str, int], None]
"""Receives ``(message, level)`` debug lines emitted by a transport."""


class MailTransport(Protocol):
    """The object that delivers one composed message."""

    name: str
    message: Message
    debug_output: DebugOutput | None

    def send(self) -> bool: ...


class SendApi(Protocol):
    """Opaque send capability of the external email API."""

    def send(self, payload: Mapping[str, Any]) -> SendResult: ...


class LogSink(Protocol):
    """Minimal logging capability a transport writes its errors to."""

    def error(self, msg: object, *args: object) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadResendConfig(Protocol):
    """Load ResendConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> ResendConfig: ...


class BuildMailer(Protocol):
    """Wire a Mailer (native transport plus interception hook) from configuration."""

    def __call__(self, config: Config) -> Mailer: ...


__all__ = [
    "BuildMailer",
    "DebugOutput",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadResendConfig",
    "LogSink",
    "MailTransport",
    "SendApi",
]
