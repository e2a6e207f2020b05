"""Shared helpers for CLI command modules.

Internal module (underscore prefix) holding the error-to-exit-code
translation every tool-running command needs.

Contents:
    * :func:`load_settings_or_exit` - Parse a config section or exit with CONFIG_ERROR.
    * :func:`run_or_exit` - Run an external command, exiting with its code on failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

import rich_click as click
from lib_layered_config import Config

from extkit.adapters.tools.prerequisites import install_hint
from extkit.domain.errors import ConfigurationError, ToolNotFoundError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT")


def load_settings_or_exit(loader: Callable[[Config], SettingsT], config: Config) -> SettingsT:
    """Parse a settings model from *config*, exiting on invalid configuration.

    Raises:
        SystemExit: With CONFIG_ERROR (78) if the section does not validate.
    """
    try:
        return loader(config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def run_or_exit(cli_ctx: CLIContext, command: Sequence[str], *, cwd: Path, label: str) -> None:
    """Run *command* through the wired ``run_tool`` service.

    Args:
        cli_ctx: CLI context providing the services.
        command: Full argument vector.
        cwd: Working directory for the child process.
        label: Human-readable step name for messages (e.g. "Develop").

    Raises:
        SystemExit: FILE_NOT_FOUND (2) if the executable is missing,
            or the tool's own exit code when it fails.
    """
    logger.debug("%s: %s", label, " ".join(command))
    try:
        exit_code = cli_ctx.services.run_tool(command, cwd=cwd)
    except ToolNotFoundError as exc:
        click.echo(f"Error: {label} needs '{exc.tool}', which is not on PATH", err=True)
        click.echo(f"Install: {install_hint(exc.tool)}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc

    if exit_code != 0:
        click.echo(f"Error: {label} failed with exit code {exit_code}", err=True)
        raise SystemExit(exit_code)


__all__ = [
    "load_settings_or_exit",
    "run_or_exit",
]
