"""``resend-mailer config``: print the merged configuration.

Values come from every lib_layered_config layer with their provenance. The
Resend API key and the SMTP password are masked by the display adapter.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from resend_mailer.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with provenance) or json",
)
@click.option("--section", default=None, help="Only show this section, e.g. 'resend'")
@click.option("--profile", default=None, help="Reload configuration for this profile instead of the root one")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration the mail commands would use.

    Layers apply in order defaults -> app -> host -> user -> dotenv -> env.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    if profile:
        config = cli_ctx.services.get_config(profile=profile)
    else:
        config, profile = cli_ctx.config, cli_ctx.profile

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": profile}):
        logger.info("Showing configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
