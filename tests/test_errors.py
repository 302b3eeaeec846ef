"""Domain error types: instantiation, message preservation and hierarchy."""

from __future__ import annotations

import pytest

from resend_mailer.domain.errors import (
    ConfigurationError,
    InvalidFieldError,
    InvalidRecipientError,
    SendFailedError,
    TransportStateError,
)


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = ConfigurationError("No recipient given")
    assert str(exc) == "No recipient given"


@pytest.mark.os_agnostic
def test_send_failed_error_preserves_api_message() -> None:
    """The API's rejection text is what the host sees."""
    exc = SendFailedError("The gmail.com domain is not verified.")
    assert str(exc) == "The gmail.com domain is not verified."


@pytest.mark.os_agnostic
def test_invalid_recipient_error_is_value_error() -> None:
    """InvalidRecipientError is a ValueError so generic handlers still catch it."""
    with pytest.raises(ValueError, match="missing domain"):
        raise InvalidRecipientError("missing domain")


@pytest.mark.os_agnostic
def test_invalid_field_error_is_lookup_error() -> None:
    """An unknown recipient field is a lookup failure."""
    with pytest.raises(LookupError, match="sender"):
        raise InvalidFieldError("Invalid recipient type: 'sender'")


@pytest.mark.os_agnostic
def test_transport_state_error_is_runtime_error() -> None:
    """A second send on a one-shot transport is a runtime misuse."""
    assert issubclass(TransportStateError, RuntimeError)


@pytest.mark.os_agnostic
def test_send_failed_error_is_not_a_runtime_error() -> None:
    """SendFailedError stays distinct from programming errors."""
    assert not issubclass(SendFailedError, RuntimeError)
