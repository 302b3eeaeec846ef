"""The ``resend-mailer`` command group.

Every invocation resolves the services factory passed on ``obj``, loads the
layered configuration for ``--profile`` once, starts logging and leaves a
:class:`~.context.CLIContext` behind for the subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from resend_mailer import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import store_cli_context
from .tracebacks import apply_traceback_preferences

if TYPE_CHECKING:
    from resend_mailer.composition import AppServices


def _resolve_services(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click types obj as Any


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load (e.g. 'production', 'test')")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Load configuration, start logging and hand over to the subcommand.

    Without a subcommand the help text is printed.

    Example:
        >>> from click.testing import CliRunner
        >>> from resend_mailer.composition import build_testing
        >>> CliRunner().invoke(cli, ["--help"], obj=build_testing).exit_code
        0
    """
    services = _resolve_services(ctx)
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Deferred: command modules import from this package.
    from .commands import cli_config, cli_info, cli_send_email, cli_send_test

    for command in (cli_info, cli_config, cli_send_test, cli_send_email):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
