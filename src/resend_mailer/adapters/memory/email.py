"""In-memory mail adapters for testing.

Nothing here opens a socket or a file. The real Mailer, hook and
ResendTransport run unchanged; only the send API, the native transport and
the log sink are replaced.

Contents:
    * :class:`ResendApiSpy` - Records payloads and returns a configured result.
    * :class:`RecordingLogSink` - Collects delivery error lines.
    * :class:`RecordingTransport` - Native transport that only records sends.
    * :class:`MailerSpy` - Builds Mailers wired to the fakes above.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lib_layered_config import Config

from ...application.mailer import MailFailure, Mailer
from ...application.ports import DebugOutput
from ...domain.message import Message
from ...domain.results import SendResult, SendSuccess
from ..email.config import load_resend_config, load_transport_settings
from ..email.hook import install_resend_hook
from ..email.validation import validate_recipient


def _empty_payload_list() -> list[dict[str, Any]]:
    return []


@dataclass
class ResendApiSpy:
    """Captures send payloads for test assertions.

    Attributes:
        payloads: Every payload passed to :meth:`send`, in order.
        result: What :meth:`send` returns; set a SendFailure to simulate rejection.
        error: Raised by :meth:`send` after recording the payload when set.

    Example:
        >>> spy = ResendApiSpy()
        >>> spy.send({"to": ["b@y.com"]})
        SendSuccess(id='test-message-id')
        >>> spy.payloads
        [{'to': ['b@y.com']}]
    """

    payloads: list[dict[str, Any]] = field(default_factory=_empty_payload_list)
    result: SendResult = SendSuccess(id="test-message-id")
    error: Exception | None = None

    def send(self, payload: Mapping[str, Any]) -> SendResult:
        self.payloads.append(dict(payload))
        if self.error is not None:
            raise self.error
        return self.result

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.payloads.clear()


@dataclass
class RecordingLogSink:
    """Collects every error line a transport writes."""

    records: list[str] = field(default_factory=list)

    def error(self, msg: object, *args: object) -> None:
        self.records.append(str(msg) % args if args else str(msg))


class RecordingTransport:
    """Native transport stand-in that records whether it was asked to send."""

    name = "recording"

    def __init__(self) -> None:
        self.message = Message()
        self.debug_output: DebugOutput | None = None
        self.sent = False

    def send(self) -> bool:
        self.sent = True
        return True


@dataclass
class MailerSpy:
    """Builds Mailers whose Resend hook talks to :attr:`api`.

    ``build_mailer`` satisfies the BuildMailer port, so it can be wired into
    AppServices in place of the production factory.

    Attributes:
        api: Send API fake shared by every transport.
        log_sink: Delivery log sink shared by every transport.
        native: Every native transport the mailers created.
        failures: Every MailFailure reported by the mailers.
    """

    api: ResendApiSpy = field(default_factory=ResendApiSpy)
    log_sink: RecordingLogSink = field(default_factory=RecordingLogSink)
    native: list[RecordingTransport] = field(default_factory=list)
    failures: list[MailFailure] = field(default_factory=list)

    def _native_transport(self) -> RecordingTransport:
        transport = RecordingTransport()
        self.native.append(transport)
        return transport

    def build_mailer(self, config: Config) -> Mailer:
        config_dict = config.as_dict()
        resend_config = load_resend_config(config_dict)
        mailer = Mailer(self._native_transport, validate_address=validate_recipient)
        mailer.add_failure_listener(self.failures.append)
        if resend_config.enabled:
            install_resend_hook(
                mailer,
                resend_config,
                settings_loader=lambda: load_transport_settings(config_dict),
                log_sink=self.log_sink,
                client_factory=lambda _settings: self.api,
            )
        return mailer


__all__ = [
    "MailerSpy",
    "RecordingLogSink",
    "RecordingTransport",
    "ResendApiSpy",
]
