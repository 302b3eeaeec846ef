"""Display configuration through lib_layered_config's Rich renderer.

Secrets are masked before rendering so ``resend-mailer config`` can be
pasted into bug reports. Masking goes through ``Config.with_overrides`` so
layer provenance stays visible next to every value.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from resend_mailer.domain.enums import OutputFormat

#: (section, key) pairs whose non-empty values are replaced before display.
SECRET_KEYS: frozenset[tuple[str, str]] = frozenset({("resend", "api_key"), ("email", "smtp_password")})
_MASK = "[REDACTED]"


def _secret_overrides(data: dict[str, Any]) -> dict[str, dict[str, object]]:
    """Collect the masked entries, nested by section; empty secrets stay visible.

    Example:
        >>> _secret_overrides({"resend": {"api_key": "re_123", "from_name": "A"}})
        {'resend': {'api_key': '[REDACTED]'}}
        >>> _secret_overrides({"resend": {"api_key": ""}, "debug": True})
        {}
    """
    overrides: dict[str, dict[str, object]] = {}
    for section, key in SECRET_KEYS:
        values = data.get(section)
        if isinstance(values, dict) and cast(dict[str, Any], values).get(key):
            overrides.setdefault(section, {})[key] = _MASK
    return overrides


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration with secrets masked.

    Flushes pending log output first so log lines do not interleave with
    the rendered configuration.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    overrides = _secret_overrides(config.as_dict())
    safe = config.with_overrides(overrides) if overrides else config
    _lib_display(safe, output_format=LibOutputFormat(output_format.value), section=section, profile=profile, console=console)


__all__ = ["SECRET_KEYS", "display_config"]
