"""Generic mail interface with a pre-delivery interception point.

Callers compose mail through :meth:`Mailer.send_mail` and only ever see a
boolean outcome. Each call composes the message on a fresh native transport,
runs the registered pre-delivery hooks (which may swap the active transport),
then dispatches on whichever transport is active at that point.

Contents:
    * :class:`DeliveryContext` - Mutable reference to the active transport.
    * :class:`MailFailure` - Payload handed to failure listeners.
    * :class:`Mailer` - Hook registry and the ``send_mail`` entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..domain.enums import ContentType, RecipientField
from ..domain.errors import SendFailedError
from ..domain.message import Address, Attachment, Message
from .ports import MailTransport

logger = logging.getLogger(__name__)

AddressLike = str | Address
AttachmentLike = str | Path | Attachment
TransportFactory = Callable[[], MailTransport]


@dataclass(slots=True)
class DeliveryContext:
    """Handed to every pre-delivery hook; hooks may replace ``transport``."""

    transport: MailTransport


PreDeliveryHook = Callable[[DeliveryContext], None]


@dataclass(frozen=True, slots=True)
class MailFailure:
    """Details of a failed ``send_mail`` call for failure listeners."""

    message: str
    recipients: tuple[str, ...]
    subject: str


FailureListener = Callable[[MailFailure], None]


def _as_addresses(value: AddressLike | Sequence[AddressLike] | None) -> list[Address]:
    if value is None:
        return []
    items: Iterable[AddressLike] = [value] if isinstance(value, str | Address) else value
    return [item if isinstance(item, Address) else Address.parse(item) for item in items]


def _as_attachments(value: Sequence[AttachmentLike] | None) -> list[Attachment]:
    if not value:
        return []
    return [item if isinstance(item, Attachment) else Attachment.from_path(item) for item in value]


class Mailer:
    """Compose and dispatch mail through a substitutable transport.

    Args:
        transport_factory: Builds the native transport for each message.
        validate_address: Optional validator applied to every address;
            raises ``InvalidRecipientError`` for malformed input.

    Example:
        >>> from resend_mailer.adapters.memory import RecordingTransport
        >>> mailer = Mailer(RecordingTransport)
        >>> mailer.send_mail("b@example.com", "Hi", "hello")
        True
    """

    def __init__(
        self,
        transport_factory: TransportFactory,
        *,
        validate_address: Callable[[str], None] | None = None,
    ) -> None:
        self._transport_factory = transport_factory
        self._validate_address = validate_address
        self._hooks: list[tuple[int, int, PreDeliveryHook]] = []
        self._failure_listeners: list[FailureListener] = []

    def add_pre_delivery_hook(self, hook: PreDeliveryHook, priority: int = 10) -> None:
        """Register *hook*; lower priorities run first, ties in registration order."""
        self._hooks.append((priority, len(self._hooks), hook))
        self._hooks.sort(key=lambda entry: (entry[0], entry[1]))

    def add_failure_listener(self, listener: FailureListener) -> None:
        self._failure_listeners.append(listener)

    def send_mail(
        self,
        to: AddressLike | Sequence[AddressLike],
        subject: str,
        body: str,
        *,
        cc: AddressLike | Sequence[AddressLike] | None = None,
        bcc: AddressLike | Sequence[AddressLike] | None = None,
        reply_to: AddressLike | Sequence[AddressLike] | None = None,
        from_address: AddressLike | None = None,
        content_type: ContentType = ContentType.PLAIN,
        attachments: Sequence[AttachmentLike] | None = None,
    ) -> bool:
        """Compose a message, run the pre-delivery hooks, and dispatch it.

        Returns:
            True when the active transport delivered the message, False when
            it raised :class:`SendFailedError`.

        Raises:
            InvalidRecipientError: When an address fails validation.
        """
        transport = self._transport_factory()
        self._compose(
            transport.message,
            subject=subject,
            body=body,
            content_type=content_type,
            from_address=_as_addresses(from_address)[0] if from_address is not None else None,
            recipients={
                RecipientField.TO: _as_addresses(to),
                RecipientField.CC: _as_addresses(cc),
                RecipientField.BCC: _as_addresses(bcc),
                RecipientField.REPLY_TO: _as_addresses(reply_to),
            },
            attachments=_as_attachments(attachments),
        )

        context = DeliveryContext(transport=transport)
        for _priority, _order, hook in self._hooks:
            hook(context)
        active = context.transport

        logger.info(
            "Dispatching mail",
            extra={
                "transport": active.name,
                "subject": subject,
                "recipient_count": len(active.message.all_recipients()),
            },
        )
        try:
            delivered = active.send()
        except SendFailedError as exc:
            self._report_failure(str(exc), active.message)
            return False
        return delivered

    def _compose(
        self,
        message: Message,
        *,
        subject: str,
        body: str,
        content_type: ContentType,
        from_address: Address | None,
        recipients: dict[RecipientField, list[Address]],
        attachments: list[Attachment],
    ) -> None:
        message.subject = subject
        message.body = body
        message.content_type = content_type
        if from_address is not None:
            self._check(from_address)
            message.from_address = from_address
        for which, addresses in recipients.items():
            for address in addresses:
                self._check(address)
                message.add_recipient(which, address.email, address.name)
        for attachment in attachments:
            message.add_attachment(attachment)

    def _check(self, address: Address) -> None:
        if self._validate_address is not None:
            self._validate_address(address.email)

    def _report_failure(self, reason: str, message: Message) -> None:
        failure = MailFailure(
            message=reason,
            recipients=tuple(address.email for address in message.to),
            subject=message.subject,
        )
        logger.error(
            "Mail delivery failed",
            extra={"error": reason, "recipients": list(failure.recipients), "subject": failure.subject},
        )
        for listener in self._failure_listeners:
            listener(failure)


__all__ = [
    "AddressLike",
    "AttachmentLike",
    "DeliveryContext",
    "FailureListener",
    "MailFailure",
    "Mailer",
    "PreDeliveryHook",
    "TransportFactory",
]
