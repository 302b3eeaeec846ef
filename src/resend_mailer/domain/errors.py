"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised at CLI boundaries when a command cannot run with the loaded
    configuration (for example ``send-test`` without any recipient).

    Example:
        >>> from resend_mailer.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No recipient configured")
        >>> str(err)
        'No recipient configured'
    """


class SendFailedError(Exception):
    """Delivery of a composed message failed.

    The only failure kind a transport lets escape from ``send()``. API
    rejections, network faults and unreadable attachments all arrive here
    with a human-readable message so the mail interface has a single
    failure path regardless of the root cause.

    Example:
        >>> from resend_mailer.domain.errors import SendFailedError
        >>> err = SendFailedError("The from field is required.")
        >>> str(err)
        'The from field is required.'
    """


class InvalidRecipientError(ValueError):
    """Email address validation failure.

    Raised when an address handed to the mail interface fails RFC 5321/5322
    validation. Inherits from ValueError so ``except ValueError`` handlers
    at the CLI boundary catch it.

    Example:
        >>> err = InvalidRecipientError("Invalid recipient: not-an-email")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidFieldError(LookupError):
    """A recipient list was requested by a name that does not exist.

    Programmer error: callers pass a :class:`RecipientField`. Never caught
    inside the package.

    Example:
        >>> str(InvalidFieldError("Invalid recipient type: sender"))
        'Invalid recipient type: sender'
    """


class TransportStateError(RuntimeError):
    """A one-shot transport was asked to send a second time."""


__all__ = [
    "ConfigurationError",
    "InvalidFieldError",
    "InvalidRecipientError",
    "SendFailedError",
    "TransportStateError",
]
