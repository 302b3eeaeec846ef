"""lib_log_rich runtime bootstrap.

The console script, ``python -m resend_mailer`` and CLI tests all start
logging through :func:`init_logging`. The first call wins; the stdlib bridge
it installs is what carries module loggers and the delivery log sink into
lib_log_rich.

Contents:
    * :class:`LoggingConfigModel` - The ``[lib_log_rich]`` section.
    * :func:`build_runtime_config` - Section to ``RuntimeConfig``.
    * :func:`init_logging` - Start the runtime once.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from resend_mailer import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys go to RuntimeConfig as-is.

    Example:
        >>> LoggingConfigModel(service="mailer").service
        'mailer'
        >>> LoggingConfigModel().environment
        'prod'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate ``[lib_log_rich]`` into a RuntimeConfig named after the package by default."""
    raw: object = config.get("lib_log_rich", default={})
    section = cast(Mapping[str, Any], raw) if isinstance(raw, Mapping) else {}
    parsed = LoggingConfigModel.model_validate(dict(section))
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich from *config* unless it is already running.

    ``LOG_*`` variables from .env files are honoured.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]
