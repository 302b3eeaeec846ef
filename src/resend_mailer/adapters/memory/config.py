"""Configuration adapters that never touch the filesystem.

:func:`config_in_memory` serves a fixed mapping for any profile, so tests can
drive commands with exactly the ``[resend]`` and ``[email]`` values they need.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat

if TYPE_CHECKING:
    from ...application.ports import GetConfig


def config_in_memory(data: Mapping[str, Any] | None = None) -> GetConfig:
    """Return a GetConfig that ignores its arguments and serves *data*.

    Example:
        >>> get = config_in_memory({"resend": {"from_name": "Shop"}})
        >>> get(profile="anything").as_dict()["resend"]["from_name"]
        'Shop'
    """
    config = Config(dict(data or {}), {})

    def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config

    return _get_config


get_config_in_memory = config_in_memory()


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept a display request and print nothing."""


__all__ = [
    "config_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
]
