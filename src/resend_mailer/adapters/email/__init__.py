"""Email adapter - transports, transcoding and the interception hook.

Structure:
    * :mod:`.config` - Settings accessor and configuration models
    * :mod:`.transcoder` - Message to Resend payload conversion
    * :mod:`.client` - Resend HTTP client returning SendResult values
    * :mod:`.resend_transport` - Transport delivering through the API
    * :mod:`.hook` - Pre-delivery hook swapping in the Resend transport
    * :mod:`.smtp_transport` - Native SMTP transport (btx_lib_mail)
    * :mod:`.validation` - Recipient validation
    * :mod:`.wiring` - Production Mailer assembly
"""

from __future__ import annotations

from .client import ResendClient
from .config import (
    ResendConfig,
    SmtpConfig,
    TransportSettings,
    load_resend_config,
    load_smtp_config,
    load_transport_settings,
)
from .hook import ResendInterceptionHook, copy_message_state, install_resend_hook
from .resend_transport import ResendTransport, build_resend_transport
from .smtp_transport import SmtpTransport
from .transcoder import build_payload, format_attachments, format_from, format_recipients
from .validation import validate_recipient
from .wiring import build_mailer

__all__ = [
    "ResendClient",
    "ResendConfig",
    "ResendInterceptionHook",
    "ResendTransport",
    "SmtpConfig",
    "SmtpTransport",
    "TransportSettings",
    "build_mailer",
    "build_payload",
    "build_resend_transport",
    "copy_message_state",
    "format_attachments",
    "format_from",
    "format_recipients",
    "install_resend_hook",
    "load_resend_config",
    "load_smtp_config",
    "load_transport_settings",
    "validate_recipient",
]
