"""Native SMTP transport backed by btx_lib_mail.

This is the host's default transport: the mail interface composes every
message on one of these before the pre-delivery hooks run. When the Resend
hook is installed it never sends; without the hook it delivers over SMTP.
"""

from __future__ import annotations

import logging
from pathlib import Path

from btx_lib_mail.lib_mail import send as btx_send

from resend_mailer.application.ports import DebugOutput
from resend_mailer.domain.enums import ContentType
from resend_mailer.domain.errors import SendFailedError
from resend_mailer.domain.message import Message

from .config import SmtpConfig

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset({"password", "credential", "auth", "secret", "token", "login"})


def _sanitize_exception_message(exc: Exception) -> str:
    """Return a generic message when *exc* text may contain credentials.

    Example:
        >>> _sanitize_exception_message(RuntimeError("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(RuntimeError("Auth password rejected"))
        'SMTP delivery failed. Check SMTP configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "SMTP delivery failed. Check SMTP configuration."
    return str(exc)


class SmtpTransport:
    """Deliver one message over SMTP using the ``[email]`` settings.

    Every to, cc and bcc address becomes an envelope recipient. Reply-to is
    not supported by btx_lib_mail and in-memory attachments are skipped.
    """

    name = "smtp"

    def __init__(self, config: SmtpConfig) -> None:
        self.message = Message()
        self.debug_output: DebugOutput | None = None
        self._config = config

    def _fail(self, reason: str) -> SendFailedError:
        if self.debug_output is not None:
            self.debug_output(reason, 1)
        return SendFailedError(reason)

    def send(self) -> bool:
        """Send the message through the configured SMTP hosts.

        Raises:
            SendFailedError: When no host or sender is configured, or every
                SMTP host refused the message.
        """
        if not self._config.smtp_hosts:
            raise self._fail("No SMTP hosts configured (email.smtp_hosts is empty)")
        sender = self.message.from_address.email if self.message.from_address else self._config.from_address
        if sender is None:
            raise self._fail("No from_address configured and none given by the message")

        recipients = [address.email for address in self.message.all_recipients()]
        attachments = [Path(a.source) for a in self.message.attachments if not a.is_raw]
        skipped = len(self.message.attachments) - len(attachments)
        if skipped:
            logger.warning("In-memory attachments are not supported over SMTP", extra={"skipped": skipped})

        is_html = self.message.content_type is ContentType.HTML
        logger.info(
            "Sending email over SMTP",
            extra={"sender": sender, "recipients": recipients, "subject": self.message.subject},
        )
        try:
            delivered = btx_send(
                mail_from=sender,
                mail_recipients=recipients,
                mail_subject=self.message.subject,
                mail_body="" if is_html else self.message.body,
                mail_body_html=self.message.body if is_html else "",
                smtphosts=self._config.smtp_hosts,
                attachment_file_paths=attachments or None,
                credentials=self._config.credentials,
                use_starttls=self._config.use_starttls,
                timeout=self._config.timeout,
            )
        except (RuntimeError, FileNotFoundError) as exc:
            logger.debug("SMTP delivery failed", exc_info=True)
            raise self._fail(_sanitize_exception_message(exc)) from exc

        if not delivered:
            raise self._fail("SMTP transport reported failure")
        return True


__all__ = ["SmtpTransport"]
