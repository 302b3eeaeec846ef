"""Config display stories: secret masking and the lib_layered_config renderer."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from resend_mailer.adapters.config.display import display_config
from resend_mailer.domain.enums import OutputFormat

# ======================== Secret masking ========================


@pytest.mark.os_agnostic
def test_display_hides_api_key_and_smtp_password(capsys: pytest.CaptureFixture[str]) -> None:
    """Both known secrets are replaced in the rendered output."""
    config = Config({"resend": {"api_key": "re_live_1"}, "email": {"smtp_password": "hunter2"}}, {})

    display_config(config, output_format=OutputFormat.JSON)
    output = capsys.readouterr().out

    assert "re_live_1" not in output
    assert "hunter2" not in output
    assert "[REDACTED]" in output


@pytest.mark.os_agnostic
def test_display_leaves_empty_secrets_unmasked(capsys: pytest.CaptureFixture[str]) -> None:
    """An unset key is shown as empty so users can spot missing configuration."""
    display_config(Config({"resend": {"api_key": "", "from_name": "Shop"}}, {}), output_format=OutputFormat.JSON)

    assert "[REDACTED]" not in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_does_not_mutate_the_loaded_config() -> None:
    """Masking works on an overlay; the Config keeps the real key."""
    config = Config({"resend": {"api_key": "re_live_1"}}, {})

    display_config(config, output_format=OutputFormat.JSON)

    assert config.get("resend", default={})["api_key"] == "re_live_1"


# ======================== display_config ========================


@pytest.mark.os_agnostic
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """Requesting a missing section raises ValueError."""
    with pytest.raises(ValueError, match="not found"):
        display_config(config_factory({"resend": {"from_name": "A"}}), section="nonexistent")


@pytest.mark.os_agnostic
def test_display_json_never_contains_the_api_key(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output is safe to paste into bug reports."""
    config = Config({"resend": {"api_key": "re_live_123", "from_name": "Shop"}}, {})
    display_config(config, output_format=OutputFormat.JSON)
    output = capsys.readouterr().out

    assert "re_live_123" not in output
    assert "Shop" in output


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output lists the section header."""
    display_config(Config({"resend": {"from_name": "Shop"}}, {}), output_format=OutputFormat.HUMAN)

    assert "[resend]" in capsys.readouterr().out
