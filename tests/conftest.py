"""Shared pytest fixtures for transport, hook and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from resend_mailer.adapters.email.config import TransportSettings
    from resend_mailer.adapters.memory.email import MailerSpy
    from resend_mailer.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: A [resend] section that lets a message reach the (fake) API.
READY_RESEND_SECTION: dict[str, Any] = {
    "api_key": "re_test_key",
    "from_email": "noreply@example.com",
    "from_name": "Example App",
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log lines and error messages go
    to ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from resend_mailer.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may monkeypatch the loader.
    """
    from resend_mailer.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_resend_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"resend": {"api_key": "re_1"}})
            assert config.get("resend.api_key") == "re_1"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def ready_settings() -> TransportSettings:
    """TransportSettings with an API key and a named sender."""
    from resend_mailer.adapters.email.config import TransportSettings as Settings

    return Settings(**READY_RESEND_SECTION)


@pytest.fixture
def mock_resend_api() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Return a factory for an ``httpx.MockTransport`` answering every request alike.

    The factory takes ``status_code`` and either ``json`` or ``content`` and
    returns ``(transport, requests)``; every request the transport sees is
    appended to ``requests``.

    Example:
        def test_send(mock_resend_api) -> None:
            transport, requests = mock_resend_api(json={"id": "abc"})
            ResendClient("k", transport=transport).send({"to": ["a@b.com"]})
            assert requests[0].url.path == "/emails"
    """

    def _factory(
        status_code: int = 200,
        *,
        json: Any = None,
        content: bytes | None = None,
    ) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return httpx.MockTransport(_handler), requests

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced.

    Example:
        def test_config_display(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"resend": {"from_name": "A"}}))
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "from_name" in result.output
    """
    from resend_mailer.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            load_resend_config=prod.load_resend_config,
            build_mailer=prod.build_mailer,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from resend_mailer.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            load_resend_config=prod.load_resend_config,
            build_mailer=prod.build_mailer,
        )
        return lambda: test_services

    return _inject


@dataclass
class MailCliContext:
    """Container for mail CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: MailerSpy capturing API payloads, delivery log lines and failures.
    """

    factory: Callable[[], Any]
    spy: MailerSpy


@pytest.fixture
def mail_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], MailCliContext]:
    """Create a mail CLI test context from a config dict.

    The returned context's factory wires production adapters except that
    ``get_config`` returns the given data and ``build_mailer`` builds Mailers
    whose Resend hook talks to an in-memory API spy.

    Example:
        def test_send_test(cli_runner, mail_cli_context) -> None:
            ctx = mail_cli_context({"resend": READY_RESEND_SECTION})
            result = cli_runner.invoke(cli, ["send-test", "--to", "a@b.com"], obj=ctx.factory)
            assert ctx.spy.api.payloads[0]["to"] == ["a@b.com"]
    """
    from resend_mailer.adapters.memory.email import MailerSpy as MailerSpyImpl
    from resend_mailer.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> MailCliContext:
        spy = MailerSpyImpl()
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            load_resend_config=prod.load_resend_config,
            build_mailer=spy.build_mailer,
        )
        return MailCliContext(factory=lambda: test_services, spy=spy)

    return _create
