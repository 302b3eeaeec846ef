"""Send-email CLI command.

Sends an arbitrary message through the same Mailer the host application
uses, so the Resend hook (or the native transport) handles it exactly as it
would handle application mail.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from resend_mailer.domain.enums import ContentType

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import execute_with_mail_error_handling

logger = logging.getLogger(__name__)


def _require_files(paths: tuple[str, ...]) -> list[Path]:
    """Return *paths* as Paths, raising FileNotFoundError for the first missing one."""
    resolved = [Path(p) for p in paths]
    for path in resolved:
        if not path.is_file():
            raise FileNotFoundError(f"No such file: {path}")
    return resolved


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "to", multiple=True, required=True, help="Recipient address (can specify multiple)")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--body", default="", help="Message body")
@click.option("--html", "is_html", is_flag=True, default=False, help="Treat --body as HTML instead of plain text")
@click.option("--cc", multiple=True, help="Carbon-copy address (can specify multiple)")
@click.option("--bcc", multiple=True, help="Blind-copy address (can specify multiple)")
@click.option("--reply-to", "reply_to", multiple=True, help="Reply-to address (can specify multiple)")
@click.option("--from", "from_address", default=None, help="Sender address for the native transport")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (can specify multiple)",
)
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    to: tuple[str, ...],
    subject: str,
    body: str,
    is_html: bool,
    cc: tuple[str, ...],
    bcc: tuple[str, ...],
    reply_to: tuple[str, ...],
    from_address: str | None,
    attachments: tuple[str, ...],
) -> None:
    """Send an email through the configured mail interface.

    Plain-text bodies have their line breaks converted to ``<br />`` when
    the Resend transport delivers them.
    """
    cli_ctx = get_cli_context(ctx)
    recipients = list(to)
    extra = {"command": "send-email", "recipients": recipients, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        logger.info(
            "Sending email",
            extra={
                "recipients": recipients,
                "subject": subject,
                "is_html": is_html,
                "attachment_count": len(attachments),
            },
        )

        def _send() -> bool:
            files = _require_files(attachments)
            mailer = cli_ctx.mailer()
            return mailer.send_mail(
                recipients,
                subject,
                body,
                cc=list(cc),
                bcc=list(bcc),
                reply_to=list(reply_to),
                from_address=from_address,
                content_type=ContentType.HTML if is_html else ContentType.PLAIN,
                attachments=files,
            )

        execute_with_mail_error_handling(operation=_send, recipients=recipients)


__all__ = ["cli_send_email"]
