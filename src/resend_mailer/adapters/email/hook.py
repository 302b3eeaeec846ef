"""Pre-delivery hook that swaps the native transport for a ResendTransport.

Registered late in the hook chain so every earlier participant has finished
editing the message. The hook copies the composed state into a fresh
transport through that transport's own add operations, converts a plain-text
body to HTML line breaks once, and replaces ``context.transport``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from resend_mailer.application.mailer import DeliveryContext, Mailer
from resend_mailer.application.ports import LogSink, SendApi
from resend_mailer.domain.enums import ContentType, RecipientField
from resend_mailer.domain.message import Message, normalize_body

from .config import ResendConfig, TransportSettings
from .resend_transport import ResendTransport, build_resend_transport

logger = logging.getLogger(__name__)

TransportBuilder = Callable[[], ResendTransport]


def copy_message_state(source: Message, target: Message) -> None:
    """Replay everything composed on *source* onto *target*.

    Addresses and attachments keep their order and duplicates. A plain-text
    body is normalized to HTML line breaks; an HTML body is copied verbatim.
    *target* is always marked as HTML afterwards.

    Example:
        >>> src = Message(subject="Hi", body="a\\nb")
        >>> src.add_recipient("cc", "c@y.com", "C")
        >>> dst = Message()
        >>> copy_message_state(src, dst)
        >>> (dst.body, dst.cc[0].name, dst.content_type.value)
        ('a<br />\\nb', 'C', 'text/html')
    """
    for which in RecipientField:
        for address in source.recipients(which):
            target.add_recipient(which, address.email, address.name)
    for attachment in source.attachments:
        target.add_attachment(attachment)

    target.subject = source.subject
    target.from_address = source.from_address
    body = source.body
    if source.content_type is ContentType.PLAIN:
        body = normalize_body(body)
    target.body = body
    target.content_type = ContentType.HTML


class ResendInterceptionHook:
    """Callable pre-delivery hook installing a ResendTransport.

    Args:
        build_transport: Returns a new, idle ResendTransport per message.
    """

    def __init__(self, build_transport: TransportBuilder) -> None:
        self._build_transport = build_transport

    def __call__(self, context: DeliveryContext) -> None:
        original = context.transport
        if isinstance(original, ResendTransport):
            return

        adapter = self._build_transport()
        adapter.debug_output = adapter.log
        copy_message_state(original.message, adapter.message)
        context.transport = adapter
        logger.debug(
            "Active transport replaced",
            extra={"replaced": original.name, "transport": adapter.name},
        )


def install_resend_hook(
    mailer: Mailer,
    config: ResendConfig,
    *,
    settings_loader: Callable[[], TransportSettings],
    log_sink: LogSink | None = None,
    client_factory: Callable[[TransportSettings], SendApi] | None = None,
) -> ResendInterceptionHook:
    """Register the interception hook on *mailer* at ``config.hook_priority``.

    Args:
        mailer: The mail interface to intercept.
        config: Operational Resend settings (endpoint, timeout, priority).
        settings_loader: Reads a fresh settings snapshot for each message.
        log_sink: Delivery log sink shared by every transport.
        client_factory: Builds the send capability from a settings snapshot;
            defaults to a :class:`ResendClient`.

    Returns:
        The registered hook.
    """

    def _build() -> ResendTransport:
        settings = settings_loader()
        client = client_factory(settings) if client_factory is not None else None
        return build_resend_transport(settings, config, log_sink=log_sink, client=client)

    hook = ResendInterceptionHook(_build)
    mailer.add_pre_delivery_hook(hook, priority=config.hook_priority)
    return hook


__all__ = [
    "ResendInterceptionHook",
    "TransportBuilder",
    "copy_message_state",
    "install_resend_hook",
]
