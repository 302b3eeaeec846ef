"""Per-invocation state handed from the root group to every command.

The root group loads configuration once and stores a :class:`CLIContext` on
``click.Context.obj``; commands fetch it with :func:`get_cli_context` and ask
it for the Resend settings or a wired :class:`Mailer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from resend_mailer.domain.errors import ConfigurationError

if TYPE_CHECKING:
    from resend_mailer.adapters.email.config import ResendConfig
    from resend_mailer.application.mailer import Mailer
    from resend_mailer.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """Loaded configuration plus the services that act on it."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None

    def resend_config(self) -> ResendConfig:
        """Parse ``[resend]``.

        Raises:
            ConfigurationError: When the section fails validation.
        """
        try:
            return self.services.load_resend_config(self.config.as_dict())
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid [resend] configuration: {exc}") from exc

    def mailer(self) -> Mailer:
        """Build a Mailer from the stored configuration.

        Raises:
            ConfigurationError: When ``[resend]`` or ``[email]`` fails validation.
        """
        try:
            return self.services.build_mailer(self.config)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid mail configuration: {exc}") from exc


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> CLIContext:
    """Attach a fresh CLIContext to *ctx* and return it.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from resend_mailer.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing()).profile is None
        True
    """
    cli_ctx = CLIContext(traceback=traceback, config=config, services=services, profile=profile)
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext the root group stored.

    Raises:
        RuntimeError: When a command runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


__all__ = [
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
]
