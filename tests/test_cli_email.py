"""CLI email stories: send-test and send-email through the intercepted Mailer."""

from __future__ import annotations

import base64
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner, Result

from resend_mailer.adapters import cli as cli_mod
from resend_mailer.adapters.cli.commands.mail import _common as mail_common
from resend_mailer.domain.results import SendFailure

if TYPE_CHECKING:
    from conftest import MailCliContext

READY_RESEND_SECTION: dict[str, Any] = {
    "api_key": "re_test_key",
    "from_email": "noreply@example.com",
    "from_name": "Example App",
}

# ======================== send-test ========================


@pytest.mark.os_agnostic
def test_when_send_test_is_invoked_it_sends_every_recipient_field(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """The test message carries to, cc, bcc and reply-to."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test", "--to", "test@example.com"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Email sent." in result.stdout
    [payload] = ctx.spy.api.payloads
    assert payload == {
        "from": "Example App <noreply@example.com>",
        "to": ["test@example.com"],
        "subject": "Test email from Resend",
        "html": "This is a test email from Resend.",
        "bcc": ["bcc_to_1@email.com", "bcc_to_2@email.com"],
        "cc": ["copy_to_1@email.com", "copy_to_2@email.com"],
        "reply_to": ["reply_to@email.com"],
    }


@pytest.mark.os_agnostic
def test_when_send_test_has_no_recipient_it_falls_back_to_admin_email(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """resend.admin_email receives the test message when --to is omitted."""
    ctx = mail_cli_context({"resend": {**READY_RESEND_SECTION, "admin_email": "admin@example.com"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.api.payloads[0]["to"] == ["admin@example.com"]


@pytest.mark.os_agnostic
def test_when_send_test_falls_back_to_admin_email_it_logs_that_recipient(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The success record names the address that actually received the message."""
    recorded = MagicMock()
    monkeypatch.setattr(mail_common, "logger", recorded)
    ctx = mail_cli_context({"resend": {**READY_RESEND_SECTION, "admin_email": "admin@example.com"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test"], obj=ctx.factory)

    assert result.exit_code == 0
    recorded.info.assert_called_once_with("Email sent via CLI", extra={"recipients": ["admin@example.com"]})


@pytest.mark.os_agnostic
def test_when_send_test_has_no_recipient_at_all_it_exits_with_config_error(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """Without --to or admin_email there is nobody to send to."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test"], obj=ctx.factory)

    assert result.exit_code == 78
    assert "admin_email" in result.stderr
    assert ctx.spy.api.payloads == []


@pytest.mark.os_agnostic
def test_when_the_api_rejects_the_test_message_it_reports_not_sent(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """A rejected send prints the failure line, logs once and exits 69."""
    ctx = mail_cli_context({"resend": {}})
    ctx.spy.api.result = SendFailure("Missing `from` field.")

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test", "--to", "test@example.com"], obj=ctx.factory)

    assert result.exit_code == 69
    assert "Error: Email not sent." in result.stderr
    assert "Email sent." not in result.stdout
    assert ctx.spy.log_sink.records == ["Missing `from` field."]
    assert [failure.recipients for failure in ctx.spy.failures] == [("test@example.com",)]


@pytest.mark.os_agnostic
def test_when_resend_is_disabled_send_test_uses_the_native_transport(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """The hook is not installed, so the API sees nothing."""
    ctx = mail_cli_context({"resend": {"enabled": False}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test", "--to", "test@example.com"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.api.payloads == []
    assert ctx.spy.native[0].sent is True


@pytest.mark.os_agnostic
def test_when_resend_config_is_invalid_send_test_exits_with_config_error(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """A non-positive timeout is a configuration error."""
    ctx = mail_cli_context({"resend": {**READY_RESEND_SECTION, "timeout": 0}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-test", "--to", "test@example.com"], obj=ctx.factory)

    assert result.exit_code == 78
    assert "Configuration error" in result.stderr


# ======================== send-email ========================


@pytest.mark.os_agnostic
def test_when_send_email_is_invoked_it_converts_plain_line_breaks(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """Plain bodies reach the API with <br /> before each line break."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "a@example.com", "--subject", "Hello", "--body", "line1\nline2"],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert ctx.spy.api.payloads[0]["html"] == "line1<br />\nline2"
    assert ctx.spy.api.payloads[0]["subject"] == "Hello"


@pytest.mark.os_agnostic
def test_when_send_email_uses_html_flag_the_body_is_verbatim(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """HTML bodies are not touched."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "a@example.com", "--subject", "Hi", "--body", "<p>a\nb</p>", "--html"],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert ctx.spy.api.payloads[0]["html"] == "<p>a\nb</p>"


@pytest.mark.os_agnostic
def test_when_send_email_receives_multiple_recipients_it_keeps_their_order(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """Repeated options keep insertion order, duplicates included."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        [
            "send-email",
            "--to",
            "b@example.com",
            "--to",
            "a@example.com",
            "--to",
            "b@example.com",
            "--cc",
            "c@example.com",
            "--reply-to",
            "r@example.com",
            "--subject",
            "Hi",
        ],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    payload = ctx.spy.api.payloads[0]
    assert payload["to"] == ["b@example.com", "a@example.com", "b@example.com"]
    assert payload["cc"] == ["c@example.com"]
    assert payload["reply_to"] == ["r@example.com"]
    assert "bcc" not in payload


@pytest.mark.os_agnostic
def test_when_send_email_has_attachments_they_are_base64_encoded(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
    tmp_path: Path,
) -> None:
    """Attachment files reach the API as base64 content with filename and type."""
    report = tmp_path / "report.txt"
    report.write_bytes(b"quarterly numbers")
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "a@example.com", "--subject", "Report", "--attachment", str(report)],
        obj=ctx.factory,
    )

    assert result.exit_code == 0
    assert ctx.spy.api.payloads[0]["attachments"] == [
        {
            "content": base64.b64encode(b"quarterly numbers").decode("ascii"),
            "filename": "report.txt",
            "type": "text/plain",
        }
    ]


@pytest.mark.os_agnostic
def test_when_send_email_attachment_is_missing_it_exits_with_file_not_found(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
    tmp_path: Path,
) -> None:
    """A missing attachment is caught before anything is sent."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "a@example.com", "--subject", "Hi", "--attachment", str(tmp_path / "missing.pdf")],
        obj=ctx.factory,
    )

    assert result.exit_code == 2
    assert "Attachment file not found" in result.stderr
    assert ctx.spy.api.payloads == []


@pytest.mark.os_agnostic
def test_when_send_email_receives_invalid_recipient_it_exits_invalid_argument(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """A malformed address fails validation with exit 22."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "not-an-address", "--subject", "Hi"],
        obj=ctx.factory,
    )

    assert result.exit_code == 22
    assert "Invalid recipient" in result.stderr
    assert ctx.spy.api.payloads == []


@pytest.mark.os_agnostic
def test_when_send_email_api_is_unreachable_it_reports_not_sent(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """A raising send capability still ends on the mail interface's failure path."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})
    ctx.spy.api.error = ConnectionError("connection refused")

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["send-email", "--to", "a@example.com", "--subject", "Hi"],
        obj=ctx.factory,
    )

    assert result.exit_code == 69
    assert "Error: Email not sent." in result.stderr
    assert ctx.spy.log_sink.records == ["connection refused"]


@pytest.mark.os_agnostic
def test_when_send_email_misses_required_options_click_rejects_it(
    cli_runner: CliRunner,
    mail_cli_context: Callable[[dict[str, Any]], MailCliContext],
) -> None:
    """--to and --subject are required."""
    ctx = mail_cli_context({"resend": READY_RESEND_SECTION})

    result: Result = cli_runner.invoke(cli_mod.cli, ["send-email", "--subject", "Hi"], obj=ctx.factory)

    assert result.exit_code == 2
    assert "--to" in result.output
