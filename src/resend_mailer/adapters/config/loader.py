"""Layered configuration loading.

:data:`get_config` reads defaults -> app -> host -> user -> dotenv -> env
through lib_layered_config and keeps one :class:`Config` per
``(profile, start_dir)`` for the life of the process. The ``[resend]``
section carries the API key and sender identity, so it usually comes from a
user file or ``RESEND_MAILER___RESEND__API_KEY`` style environment variables
rather than the bundled defaults.
"""

from __future__ import annotations

from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from resend_mailer import __init__conf__

_CacheKey = tuple[str | None, str | None]


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names lib_layered_config would refuse or misuse as paths.

    Raises:
        ValueError: On empty, overlong or path-like names.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


class LayeredConfigLoader:
    """Callable config source with a per-(profile, start_dir) cache.

    Args:
        default_file: Lowest-precedence TOML layer shipped with the package.

    Example:
        >>> loader = LayeredConfigLoader(get_default_config_path())
        >>> loader().get("nonexistent", default="fallback")
        'fallback'
        >>> loader() is loader()
        True
    """

    def __init__(self, default_file: Path) -> None:
        self._default_file = default_file
        self._cache: dict[_CacheKey, Config] = {}

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration, reading the layers on first use.

        Args:
            profile: Inserts ``profile/<name>/`` into every configuration path.
            start_dir: Seeds .env discovery; defaults to the working directory.

        Raises:
            ValueError: When *profile* is not a valid profile name.
        """
        if profile is not None:
            validate_profile(profile)
        key: _CacheKey = (profile, start_dir)
        cached = self._cache.get(key)
        if cached is None:
            cached = read_config(
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                profile=profile,
                default_file=self._default_file,
                start_dir=start_dir,
            )
            self._cache[key] = cached
        return cached

    def cache_clear(self) -> None:
        """Forget every loaded configuration so the next call re-reads all layers."""
        self._cache.clear()


get_config = LayeredConfigLoader(get_default_config_path())


__all__ = [
    "LayeredConfigLoader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
