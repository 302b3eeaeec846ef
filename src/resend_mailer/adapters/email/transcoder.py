"""Convert a composed Message into the Resend send payload.

Pure functions apart from :func:`format_attachments`, which reads
file-backed attachments from disk.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any, TypedDict

from resend_mailer.domain.enums import RecipientField
from resend_mailer.domain.message import Message, resolve_field

from .config import TransportSettings


class PayloadAttachment(TypedDict):
    content: str
    filename: str
    type: str


def format_from(settings: TransportSettings) -> str:
    """Return the sender header value for the payload.

    Example:
        >>> format_from(TransportSettings(from_email="a@x.com", from_name="A"))
        'A <a@x.com>'
        >>> format_from(TransportSettings(from_email="a@x.com"))
        'a@x.com'
    """
    if not settings.from_name:
        return settings.from_email
    return f"{settings.from_name} <{settings.from_email}>"


def format_recipients(message: Message, field: RecipientField | str = RecipientField.TO) -> list[str]:
    """Return the bare addresses of one recipient list, display names dropped.

    Raises:
        InvalidFieldError: When *field* names no recipient list.

    Example:
        >>> msg = Message()
        >>> msg.add_recipient("to", "b@y.com", "B")
        >>> msg.add_recipient("to", "b@y.com")
        >>> format_recipients(msg)
        ['b@y.com', 'b@y.com']
    """
    return [address.email for address in message.recipients(resolve_field(field))]


def encode_file(path: str | Path) -> str:
    """Return the base64 text of the file at *path*.

    Raises:
        OSError: When the file cannot be read.
    """
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def format_attachments(message: Message) -> list[PayloadAttachment]:
    """Return the payload form of every attachment, in order.

    Raw attachments pass through unchanged; file attachments are read and
    base64-encoded.

    Raises:
        OSError: When a file attachment cannot be read.
    """
    attachments: list[PayloadAttachment] = []
    for attachment in message.attachments:
        content = attachment.source if attachment.is_raw else encode_file(attachment.source)
        attachments.append(
            {
                "content": content,
                "filename": attachment.filename,
                "type": attachment.mime_type,
            }
        )
    return attachments


def build_payload(message: Message, settings: TransportSettings) -> dict[str, Any]:
    """Assemble the JSON body of one send call.

    ``cc``, ``bcc``, ``reply_to`` and ``attachments`` are only present when
    non-empty. The body goes into ``html`` verbatim.

    Raises:
        OSError: When a file attachment cannot be read.

    Example:
        >>> msg = Message(subject="Hi", body="hello")
        >>> msg.add_recipient("to", "b@y.com", "B")
        >>> build_payload(msg, TransportSettings(api_key="k", from_email="a@x.com", from_name="A"))
        {'from': 'A <a@x.com>', 'to': ['b@y.com'], 'subject': 'Hi', 'html': 'hello'}
    """
    payload: dict[str, Any] = {
        "from": format_from(settings),
        "to": format_recipients(message, RecipientField.TO),
        "subject": message.subject,
        "html": message.body,
    }
    for which in (RecipientField.BCC, RecipientField.CC, RecipientField.REPLY_TO):
        addresses = format_recipients(message, which)
        if addresses:
            payload[which.value] = addresses
    attachments = format_attachments(message)
    if attachments:
        payload["attachments"] = attachments
    return payload


__all__ = [
    "PayloadAttachment",
    "build_payload",
    "encode_file",
    "format_attachments",
    "format_from",
    "format_recipients",
]
