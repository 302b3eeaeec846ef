"""Address validation for the mail interface.

Mailers built by production wiring and by the in-memory spy both pass every
address through :func:`validate_recipient`, so a malformed address fails
the same way in tests as in production.
"""

from __future__ import annotations

from btx_lib_mail import validate_email_address

from resend_mailer.domain.errors import InvalidRecipientError


def validate_recipient(recipient: str) -> None:
    """Check *recipient* with btx_lib_mail's address rules.

    Raises:
        InvalidRecipientError: The ValueError subclass the CLI maps to exit 22.

    Example:
        >>> validate_recipient("valid@example.com")
        >>> validate_recipient("not-an-address")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidRecipientError: Invalid recipient: not-an-address
    """
    try:
        validate_email_address(recipient)
    except ValueError as exc:
        raise InvalidRecipientError(f"Invalid recipient: {recipient}") from exc


__all__ = ["validate_recipient"]
