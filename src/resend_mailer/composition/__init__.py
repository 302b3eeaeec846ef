"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Email services
from ..adapters.email.config import load_resend_config
from ..adapters.email.wiring import build_mailer

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright checks that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.email import MailerSpy
    from ..application.ports import (
        BuildMailer,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadResendConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_resend_config: LoadResendConfig = load_resend_config
    _assert_build_mailer: BuildMailer = build_mailer


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_resend_config: LoadResendConfig
    build_mailer: BuildMailer


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_resend_config=load_resend_config,
        build_mailer=build_mailer,
    )


def build_testing(
    *,
    spy: MailerSpy | None = None,
    config_data: Mapping[str, Any] | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional MailerSpy whose send API, log sink and native
            transports back every Mailer the services build. When None, a
            fresh MailerSpy is created.
        config_data: Configuration served by ``get_config`` for every
            profile. Empty when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        MailerSpy,
        config_in_memory,
        display_config_in_memory,
        init_logging_in_memory,
    )

    mailer_spy = spy if spy is not None else MailerSpy()

    return AppServices(
        get_config=config_in_memory(config_data),
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_resend_config=load_resend_config,
        build_mailer=mailer_spy.build_mailer,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Email
    "build_mailer",
    "load_resend_config",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
