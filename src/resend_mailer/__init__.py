"""Route outgoing mail through the Resend HTTP API.

Public surface:
- Domain: the Message model and the send result types
- Application: the Mailer host interface
- Composition: wired configuration and Mailer assembly
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.mailer import Mailer

# Composition exports (wired adapters)
from .composition import build_mailer, get_config

# Domain exports
from .domain import Message, SendFailedError, SendFailure, SendResult, SendSuccess

__all__ = [
    "Mailer",
    "Message",
    "SendFailedError",
    "SendFailure",
    "SendResult",
    "SendSuccess",
    "build_mailer",
    "get_config",
    "print_info",
]
