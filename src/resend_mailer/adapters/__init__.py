"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading and display
    * :mod:`.email` - Resend and SMTP transports, payload transcoding, the interception hook
    * :mod:`.logging` - lib_log_rich setup and the delivery log sink
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
