"""Static package metadata surfaced to CLI commands and documentation.

Contents:
    * Distribution constants (:data:`name`, :data:`version`, :data:`title`).
    * lib_layered_config identifiers used to locate configuration files.
    * :func:`print_info` - Render the metadata block for ``resend-mailer info``.
"""

from __future__ import annotations

from importlib import metadata as _metadata

name = "resend_mailer"
title = "Deliver outbound mail through the Resend HTTP API"
shell_command = "resend-mailer"
homepage = "https://resend.com"
author = "resend_mailer maintainers"

#: lib_layered_config identifiers: vendor/app for macOS and Windows paths, slug for XDG paths.
LAYEREDCONF_VENDOR = "resend_mailer"
LAYEREDCONF_APP = "Resend Mailer"
LAYEREDCONF_SLUG = "resend-mailer"


def _resolve_version() -> str:
    """Return the installed distribution version, or a development marker."""
    try:
        return _metadata.version("resend-mailer")
    except _metadata.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for resend_mailer:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
