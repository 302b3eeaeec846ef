"""Mail transport that delivers through the Resend HTTP API.

A :class:`ResendTransport` serves exactly one message. Its settings
snapshot, API client and log sink are fixed at construction. ``send()``
moves the transport from IDLE to SENT, issues a single API call, and either
returns True or raises :class:`SendFailedError` so the mail interface's
failure path runs the same way it does for native delivery.
"""

from __future__ import annotations

import logging

from resend_mailer.adapters.logging.delivery import build_delivery_log_sink
from resend_mailer.application.ports import DebugOutput, LogSink, SendApi
from resend_mailer.domain.enums import TransportState
from resend_mailer.domain.errors import SendFailedError, TransportStateError
from resend_mailer.domain.message import Message
from resend_mailer.domain.results import SendFailure, SendResult, is_success

from .client import ResendClient
from .config import ResendConfig, TransportSettings
from .transcoder import build_payload

logger = logging.getLogger(__name__)

#: Debug level used for delivery errors, matching the "client/server conversation" level.
DEBUG_LEVEL_ERROR = 2


class ResendTransport:
    """Deliver one message through the send API.

    Args:
        settings: API key and sender identity for this message.
        client: Send capability; usually :class:`ResendClient`.
        log_sink: Receives one error line per failed delivery. Defaults to
            the shared delivery logger.

    Example:
        >>> from resend_mailer.adapters.memory import ResendApiSpy
        >>> transport = ResendTransport(settings=TransportSettings(from_email="a@x.com"), client=ResendApiSpy())
        >>> transport.message.add_recipient("to", "b@y.com")
        >>> transport.send()
        True
        >>> transport.state
        <TransportState.SENT: 'sent'>
    """

    name = "resend"

    def __init__(
        self,
        *,
        settings: TransportSettings,
        client: SendApi,
        log_sink: LogSink | None = None,
    ) -> None:
        self.message = Message()
        self.settings = settings
        self._client = client
        self._log_sink: LogSink = log_sink if log_sink is not None else build_delivery_log_sink()
        self.debug_output: DebugOutput | None = self.log
        self._state = TransportState.IDLE

    @property
    def state(self) -> TransportState:
        return self._state

    def send(self) -> bool:
        """Deliver the message with one API call.

        Returns:
            True when the API accepted the message.

        Raises:
            SendFailedError: When the API rejected the message, could not be
                reached, or an attachment could not be read.
            TransportStateError: When this transport already attempted a send.
        """
        if self._state is not TransportState.IDLE:
            raise TransportStateError("This transport has already sent its message")
        self._state = TransportState.SENT

        result = self._dispatch()
        if is_success(result):
            logger.info("Resend accepted message", extra={"message_id": result.id})
            return True

        # ResendClient never returns an empty id; injected SendApi implementations may.
        reason = result.message if isinstance(result, SendFailure) else "Resend API returned an empty message id"
        self._debug(reason)
        raise SendFailedError(reason)

    def _dispatch(self) -> SendResult:
        try:
            payload = build_payload(self.message, self.settings)
        except OSError as exc:
            return SendFailure(f"Could not read attachment: {exc}")
        try:
            return self._client.send(payload)
        except Exception as exc:
            logger.debug("Send API raised", exc_info=True)
            return SendFailure(str(exc) or type(exc).__name__)

    def _debug(self, message: str) -> None:
        if self.debug_output is not None:
            self.debug_output(message, DEBUG_LEVEL_ERROR)

    def log(self, message: str, level: int = 0) -> None:
        """Forward *message* to the log sink's error method; *level* is ignored."""
        try:
            self._log_sink.error(message)
        except Exception:
            logger.warning("Delivery log sink rejected a record", exc_info=True)


def build_resend_transport(
    settings: TransportSettings,
    config: ResendConfig,
    *,
    log_sink: LogSink | None = None,
    client: SendApi | None = None,
) -> ResendTransport:
    """Construct a transport with a ResendClient bound to ``settings.api_key``.

    Pass *client* to substitute the send capability (tests use an in-memory spy).
    """
    api = client
    if api is None:
        api = ResendClient(settings.api_key, base_url=config.api_url, timeout=config.timeout)
    return ResendTransport(settings=settings, client=api, log_sink=log_sink)


__all__ = ["DEBUG_LEVEL_ERROR", "ResendTransport", "build_resend_transport"]
