"""Message value types shared by the mail interface and every transport.

A :class:`Message` is the composed mail a transport delivers. It carries
addresses and attachments in insertion order and never deduplicates them.
Recipient lists are reached through :class:`RecipientField` so an unknown
list name fails immediately instead of yielding an empty result.

Contents:
    * :class:`Address` - ``(email, name)`` pair.
    * :class:`Attachment` - file-backed or in-memory attachment.
    * :class:`Message` - mutable composed message.
    * :func:`resolve_field` - map a field name onto :class:`RecipientField`.
    * :func:`normalize_body` - plain-text to HTML line-break conversion.
"""

from __future__ import annotations

import mimetypes
import re
from dataclasses import dataclass, field
from email.utils import formataddr, parseaddr
from pathlib import Path

from .enums import ContentType, RecipientField
from .errors import InvalidFieldError

_LINE_BREAK = re.compile(r"(\r\n|\n\r|\n|\r)")
_DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class Address:
    """A mailbox address with an optional display name.

    Example:
        >>> Address.parse("Jane Doe <jane@example.com>")
        Address(email='jane@example.com', name='Jane Doe')
        >>> str(Address("jane@example.com"))
        'jane@example.com'
    """

    email: str
    name: str = ""

    @classmethod
    def parse(cls, raw: str) -> Address:
        """Split a header-style ``"Name <email>"`` string into an Address."""
        name, email = parseaddr(raw)
        if not email:
            # parseaddr gives up on some malformed input; keep it for validation to reject
            return cls(email=raw.strip())
        return cls(email=email, name=name)

    def __str__(self) -> str:
        return formataddr((self.name, self.email)) if self.name else self.email


@dataclass(frozen=True, slots=True)
class Attachment:
    """An attachment as composed by the mail interface.

    ``source`` is a filesystem path unless ``is_raw`` is set, in which case it
    is the attachment content itself and is delivered unchanged.

    Example:
        >>> att = Attachment.from_path("/tmp/report.pdf")
        >>> (att.filename, att.mime_type, att.is_raw)
        ('report.pdf', 'application/pdf', False)
        >>> Attachment.from_content("aGVsbG8=", "hello.txt").is_raw
        True
    """

    source: str
    filename: str
    name: str
    encoding: str = "base64"
    mime_type: str = _DEFAULT_MIME_TYPE
    is_raw: bool = False
    disposition: str = "attachment"

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        name: str = "",
        encoding: str = "base64",
        mime_type: str = "",
        disposition: str = "attachment",
    ) -> Attachment:
        """Build a file-backed attachment, deriving filename and type from the path."""
        filename = Path(path).name
        return cls(
            source=str(path),
            filename=filename,
            name=name or filename,
            encoding=encoding,
            mime_type=mime_type or guess_mime_type(filename),
            is_raw=False,
            disposition=disposition,
        )

    @classmethod
    def from_content(
        cls,
        content: str,
        filename: str,
        *,
        encoding: str = "base64",
        mime_type: str = "",
        disposition: str = "attachment",
    ) -> Attachment:
        """Build an in-memory attachment whose content is already encoded."""
        return cls(
            source=content,
            filename=filename,
            name=filename,
            encoding=encoding,
            mime_type=mime_type or guess_mime_type(filename),
            is_raw=True,
            disposition=disposition,
        )


def guess_mime_type(filename: str) -> str:
    """Return the MIME type for *filename*, defaulting to octet-stream.

    Example:
        >>> guess_mime_type("notes.txt")
        'text/plain'
        >>> guess_mime_type("blob")
        'application/octet-stream'
    """
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or _DEFAULT_MIME_TYPE


def resolve_field(value: RecipientField | str) -> RecipientField:
    """Return the :class:`RecipientField` named by *value*.

    Raises:
        InvalidFieldError: When *value* names no recipient list.

    Example:
        >>> resolve_field("cc")
        <RecipientField.CC: 'cc'>
        >>> resolve_field("sender")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidFieldError: Invalid recipient type: 'sender'
    """
    if isinstance(value, RecipientField):
        return value
    try:
        return RecipientField(value)
    except ValueError:
        raise InvalidFieldError(f"Invalid recipient type: {value!r}") from None


def _empty_addresses() -> list[Address]:
    return []


def _empty_attachments() -> list[Attachment]:
    return []


@dataclass(slots=True)
class Message:
    """A composed message held by exactly one transport.

    Example:
        >>> msg = Message(subject="Hi")
        >>> msg.add_recipient(RecipientField.TO, "b@example.com", "B")
        >>> [a.email for a in msg.recipients("to")]
        ['b@example.com']
    """

    subject: str = ""
    body: str = ""
    content_type: ContentType = ContentType.PLAIN
    from_address: Address | None = None
    to: list[Address] = field(default_factory=_empty_addresses)
    cc: list[Address] = field(default_factory=_empty_addresses)
    bcc: list[Address] = field(default_factory=_empty_addresses)
    reply_to: list[Address] = field(default_factory=_empty_addresses)
    attachments: list[Attachment] = field(default_factory=_empty_attachments)

    def recipients(self, which: RecipientField | str) -> list[Address]:
        """Return the live address list for *which*.

        Raises:
            InvalidFieldError: When *which* names no recipient list.
        """
        lists = {
            RecipientField.TO: self.to,
            RecipientField.CC: self.cc,
            RecipientField.BCC: self.bcc,
            RecipientField.REPLY_TO: self.reply_to,
        }
        return lists[resolve_field(which)]

    def add_recipient(self, which: RecipientField | str, email: str, name: str = "") -> None:
        """Append an address to the list named by *which*."""
        self.recipients(which).append(Address(email=email, name=name))

    def add_attachment(self, attachment: Attachment) -> None:
        self.attachments.append(attachment)

    def all_recipients(self) -> list[Address]:
        """Return every envelope recipient: to, then cc, then bcc."""
        return [*self.to, *self.cc, *self.bcc]


def normalize_body(body: str) -> str:
    r"""Insert ``<br />`` before every line break so plain text renders as HTML.

    Mirrors the classic ``nl2br`` behaviour: the original line breaks are kept,
    nothing is escaped.

    Example:
        >>> normalize_body("line1\nline2")
        'line1<br />\nline2'
        >>> normalize_body("a\r\nb")
        'a<br />\r\nb'
        >>> normalize_body("hello")
        'hello'
    """
    return _LINE_BREAK.sub(r"<br />\1", body)


__all__ = [
    "Address",
    "Attachment",
    "Message",
    "guess_mime_type",
    "normalize_body",
    "resolve_field",
]
