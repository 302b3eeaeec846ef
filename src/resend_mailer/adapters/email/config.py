"""Transport configuration models and loaders.

Bridges lib_layered_config's dictionary output with typed, immutable
Pydantic models. Three models live here:

* :class:`TransportSettings` - API key and sender identity read by the
  Resend transport. Deliberately unvalidated: missing values become empty
  strings and surface later as an API rejection.
* :class:`ResendConfig` - operational settings of the Resend integration
  (endpoint, timeout, delivery log, hook priority).
* :class:`SmtpConfig` - settings of the native SMTP transport.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, cast

from btx_lib_mail import validate_email_address, validate_smtp_host
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_API_URL = "https://api.resend.com"
DEFAULT_HOOK_PRIORITY = 1000


def _redacted_repr(model: BaseModel, secrets: Iterable[str]) -> str:
    """Render *model* like a dataclass repr with secret fields masked."""
    hidden = set(secrets)
    fields: list[str] = []
    for name, value in model:
        if name in hidden and value:
            fields.append(f"{name}='[REDACTED]'")
        else:
            fields.append(f"{name}={value!r}")
    return f"{type(model).__name__}({', '.join(fields)})"


def _section(config_dict: Mapping[str, Any], name: str) -> dict[str, Any]:
    """Return a copy of the ``[name]`` section, or an empty dict when absent or malformed."""
    raw: Any = config_dict.get(name, {})
    if not isinstance(raw, Mapping):
        return {}
    return dict(cast(Mapping[str, Any], raw))


class TransportSettings(BaseModel):
    """Snapshot of the API key and sender identity.

    Example:
        >>> settings = TransportSettings(api_key="re_123", from_email="a@x.com")
        >>> settings.from_name
        ''
        >>> "re_123" in repr(settings)
        False
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: str = ""
    from_email: str = ""
    from_name: str = ""

    @field_validator("api_key", "from_email", "from_name", mode="before")
    @classmethod
    def _coerce_to_string(cls, v: Any) -> str:
        """Treat missing values as empty strings and stringify scalars."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    def __repr__(self) -> str:
        return _redacted_repr(self, ("api_key",))


class ResendConfig(BaseModel):
    """Validated, immutable settings for the Resend integration.

    Example:
        >>> config = ResendConfig(timeout=10)
        >>> (config.api_url, config.timeout, config.hook_priority)
        ('https://api.resend.com', 10.0, 1000)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = True
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    log_file: Path | None = None
    hook_priority: int = DEFAULT_HOOK_PRIORITY
    admin_email: str | None = None

    @field_validator("log_file", "admin_email", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Empty strings from config files mean "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> ResendConfig:
        """Reject values that would only fail later at send time.

        Example:
            >>> ResendConfig(timeout=0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.api_url.startswith(("https://", "http://")):
            raise ValueError(f"api_url must be an http(s) URL, got {self.api_url!r}")
        if self.admin_email is not None:
            validate_email_address(self.admin_email)
        return self


class SmtpConfig(BaseModel):
    """Validated, immutable settings for the native SMTP transport.

    Example:
        >>> SmtpConfig(smtp_hosts="smtp.example.com:587").smtp_hosts
        ['smtp.example.com:587']
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    smtp_hosts: list[str] = Field(default_factory=list)
    from_address: str | None = None
    smtp_username: str | None = None
    smtp_password: str | None = None
    use_starttls: bool = True
    timeout: float = 30.0

    @field_validator("smtp_hosts", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> list[str]:
        """Single strings from env variables become one-element lists."""
        if isinstance(v, str):
            return [v] if v.strip() else []
        if isinstance(v, list):
            return cast(list[str], v)
        return []

    @field_validator("from_address", "smtp_username", "smtp_password", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> SmtpConfig:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.from_address is not None:
            validate_email_address(self.from_address)
        for host in self.smtp_hosts:
            validate_smtp_host(host)
        return self

    @property
    def credentials(self) -> tuple[str, str] | None:
        """Return (username, password) when both are set, else None."""
        if self.smtp_username is not None and self.smtp_password is not None:
            return (self.smtp_username, self.smtp_password)
        return None

    def __repr__(self) -> str:
        return _redacted_repr(self, ("smtp_password",))


def load_transport_settings(config_dict: Mapping[str, Any]) -> TransportSettings:
    """Read ``api_key``, ``from_email`` and ``from_name`` from ``[resend]``.

    Missing keys, a missing section or a malformed section all yield empty
    strings. No validation happens here.

    Example:
        >>> load_transport_settings({"resend": {"api_key": "k", "from_email": "a@x.com"}}).from_email
        'a@x.com'
        >>> load_transport_settings({}).api_key
        ''
    """
    section = _section(config_dict, "resend")
    return TransportSettings(
        api_key=section.get("api_key"),
        from_email=section.get("from_email"),
        from_name=section.get("from_name"),
    )


def load_resend_config(config_dict: Mapping[str, Any]) -> ResendConfig:
    """Load ResendConfig from the ``[resend]`` section.

    Example:
        >>> load_resend_config({"resend": {"timeout": 5}}).timeout
        5.0
    """
    return ResendConfig.model_validate(_section(config_dict, "resend"))


def load_smtp_config(config_dict: Mapping[str, Any]) -> SmtpConfig:
    """Load SmtpConfig from the ``[email]`` section.

    Example:
        >>> load_smtp_config({}).smtp_hosts
        []
    """
    return SmtpConfig.model_validate(_section(config_dict, "email"))


__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_HOOK_PRIORITY",
    "ResendConfig",
    "SmtpConfig",
    "TransportSettings",
    "load_resend_config",
    "load_smtp_config",
    "load_transport_settings",
]
