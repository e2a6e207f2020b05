"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``pyproject.toml``; the version line is rewritten on
release so both stay in sync.

Contents:
    * Module-level metadata constants (name, version, homepage, ...).
    * ``LAYEREDCONF_*`` identifiers used by :mod:`lib_layered_config`.
    * :func:`print_info` - render the metadata block for ``extkit info``.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "extkit"
#: Human-readable summary shown in CLI help output.
title = "Scaffold, develop and deploy native Python extensions with maturin"
#: Current release version.
version = "0.3.1"
#: Repository homepage presented to users.
homepage = "https://github.com/extkit/extkit"
#: Author attribution surfaced in CLI output.
author = "extkit contributors"
#: Contact email surfaced in CLI output.
author_email = "extkit@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "extkit"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "extkit"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "extkit"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "extkit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for extkit:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
