"""Type-safe domain enums for message content, recipient lists and display."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """Body content types understood by the mail interface.

    Example:
        >>> ContentType("text/plain") is ContentType.PLAIN
        True
        >>> ContentType.HTML == "text/html"
        True
    """

    PLAIN = "text/plain"
    HTML = "text/html"


class RecipientField(str, Enum):
    """Names of the ordered address lists carried by a message.

    Values match the keys of the Resend send payload.

    Example:
        >>> RecipientField("reply_to") is RecipientField.REPLY_TO
        True
    """

    TO = "to"
    CC = "cc"
    BCC = "bcc"
    REPLY_TO = "reply_to"


class TransportState(str, Enum):
    """Lifecycle of a one-shot transport.

    Attributes:
        IDLE: Constructed, message may still be composed.
        SENT: A delivery attempt was made; terminal.
    """

    IDLE = "idle"
    SENT = "sent"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "ContentType",
    "OutputFormat",
    "RecipientField",
    "TransportState",
]
