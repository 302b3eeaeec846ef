"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.message` - Message, Address, Attachment and body normalization
    * :mod:`.results` - SendResult variants returned by the send API client
    * :mod:`.enums` - ContentType, RecipientField, TransportState, OutputFormat
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import ContentType, OutputFormat, RecipientField, TransportState
from .errors import (
    ConfigurationError,
    InvalidFieldError,
    InvalidRecipientError,
    SendFailedError,
    TransportStateError,
)
from .message import Address, Attachment, Message, normalize_body, resolve_field
from .results import SendFailure, SendResult, SendSuccess, is_success

__all__ = [
    # Message model
    "Address",
    "Attachment",
    "Message",
    "normalize_body",
    "resolve_field",
    # Results
    "SendFailure",
    "SendResult",
    "SendSuccess",
    "is_success",
    # Enums
    "ContentType",
    "OutputFormat",
    "RecipientField",
    "TransportState",
    # Errors
    "ConfigurationError",
    "InvalidFieldError",
    "InvalidRecipientError",
    "SendFailedError",
    "TransportStateError",
]
