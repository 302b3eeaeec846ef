"""Production Mailer assembly.

The native SMTP transport is always the Mailer's default. When
``resend.enabled`` is true the interception hook is registered on top of
it, so every message leaves through the Resend API instead.
"""

from __future__ import annotations

import logging

from lib_layered_config import Config

from ...application.mailer import Mailer
from ..logging.delivery import build_delivery_log_sink
from .config import load_resend_config, load_smtp_config, load_transport_settings
from .hook import install_resend_hook
from .smtp_transport import SmtpTransport
from .validation import validate_recipient

logger = logging.getLogger(__name__)


def build_mailer(config: Config) -> Mailer:
    """Return a Mailer wired from *config*.

    Example:
        >>> from lib_layered_config import Config
        >>> mailer = build_mailer(Config({"resend": {"enabled": False}}, {}))
        >>> isinstance(mailer, Mailer)
        True
    """
    config_dict = config.as_dict()
    resend_config = load_resend_config(config_dict)
    smtp_config = load_smtp_config(config_dict)

    mailer = Mailer(lambda: SmtpTransport(smtp_config), validate_address=validate_recipient)
    if resend_config.enabled:
        install_resend_hook(
            mailer,
            resend_config,
            settings_loader=lambda: load_transport_settings(config_dict),
            log_sink=build_delivery_log_sink(resend_config.log_file),
        )
        logger.debug("Resend interception enabled", extra={"priority": resend_config.hook_priority})
    else:
        logger.debug("Resend interception disabled; native transport delivers")
    return mailer


__all__ = ["build_mailer"]
