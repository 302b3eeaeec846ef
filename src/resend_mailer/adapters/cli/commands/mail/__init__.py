"""Mail sending CLI commands.

Contents:
    * :func:`.send_test.cli_send_test` - Send the canned test message.
    * :func:`.send_email.cli_send_email` - Send an arbitrary message.
"""

from __future__ import annotations

from .send_email import cli_send_email
from .send_test import cli_send_test

__all__ = ["cli_send_email", "cli_send_test"]
