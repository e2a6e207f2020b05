"""Sample CLI commands: package info, the greeting, and file helpers.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Emit the canonical greeting.
    * :func:`cli_tac` - Print a file's content reversed.
    * :func:`cli_count_lines` - Print the number of newlines in a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from extkit import __init__conf__
from extkit.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the sample greeting.

    Example:
        >>> from click.testing import CliRunner
        >>> "Hello, world!" in CliRunner().invoke(cli_hello).output
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Executing hello command")
        click.echo(build_greeting())


def _exit_code_for(exc: OSError) -> ExitCode:
    if isinstance(exc, FileNotFoundError):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(exc, IsADirectoryError):
        return ExitCode.IS_A_DIRECTORY
    return ExitCode.GENERAL_ERROR


@click.command("tac", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("filename", type=click.Path(path_type=Path))
@click.pass_context
def cli_tac(ctx: click.Context, filename: Path) -> None:
    """Print FILENAME with its character order reversed.

    The whole file is read as UTF-8 text. Nothing is printed when the
    file cannot be read.

    Example:
        extkit tac notes.txt
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-tac", extra={"command": "tac", "path": str(filename)}):
        try:
            reversed_text = cli_ctx.services.tac(filename)
        except OSError as exc:
            click.echo(f"Error: cannot read '{filename}': {exc.strerror or exc}", err=True)
            raise SystemExit(_exit_code_for(exc)) from exc
        except UnicodeDecodeError as exc:
            click.echo(f"Error: '{filename}' is not UTF-8 text", err=True)
            raise SystemExit(ExitCode.DATA_ERROR) from exc
        click.echo(reversed_text, nl=False)



@click.command("count-lines", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("filename", type=click.Path(path_type=Path))
@click.pass_context
def cli_count_lines(ctx: click.Context, filename: Path) -> None:
    """Print how many newline characters FILENAME contains.

    Works on files of any size and encoding; the file is streamed.

    Example:
        extkit count-lines access.log
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-count-lines", extra={"command": "count-lines", "path": str(filename)}):
        try:
            count = cli_ctx.services.count_lines(filename)
        except OSError as exc:
            click.echo(f"Error: cannot read '{filename}': {exc.strerror or exc}", err=True)
            raise SystemExit(_exit_code_for(exc)) from exc
        click.echo(str(count))


__all__ = ["cli_count_lines", "cli_hello", "cli_info", "cli_tac"]
