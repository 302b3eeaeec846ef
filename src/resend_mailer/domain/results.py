"""Outcome of a single send-API call.

The HTTP client returns one of these variants instead of raising, so the
transport decides success by inspecting the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeGuard


@dataclass(frozen=True, slots=True)
class SendSuccess:
    """The API accepted the message and assigned it an identifier."""

    id: str


@dataclass(frozen=True, slots=True)
class SendFailure:
    """The API rejected the message or could not be reached."""

    message: str


SendResult = SendSuccess | SendFailure
"""Either an accepted message id or a caller-visible error message."""


def is_success(result: SendResult) -> TypeGuard[SendSuccess]:
    """Return True when *result* carries a non-empty message identifier.

    Example:
        >>> is_success(SendSuccess(id="abc"))
        True
        >>> is_success(SendSuccess(id=""))
        False
        >>> is_success(SendFailure(message="nope"))
        False
    """
    return isinstance(result, SendSuccess) and bool(result.id)


__all__ = [
    "SendFailure",
    "SendResult",
    "SendSuccess",
    "is_success",
]
