"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Mail commands from :mod:`.mail` (subpackage)
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .mail import cli_send_email, cli_send_test

__all__ = [
    "cli_config",
    "cli_info",
    "cli_send_email",
    "cli_send_test",
]
