"""CLI commands for the reproducible build container.

Contents:
    * :func:`cli_container_build` - Build the development image.
    * :func:`cli_container_run` - Open an interactive, bind-mounted session.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from extkit.adapters.container.commands import (
    build_image_command,
    build_run_command,
    load_container_settings,
)

from ..constants import CLICK_CONTEXT_SETTINGS, PASSTHROUGH_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_settings_or_exit, run_or_exit

logger = logging.getLogger(__name__)


@click.command("container-build", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--context",
    "context_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Build context holding the Dockerfile (defaults to the current directory)",
)
@click.pass_context
def cli_container_build(ctx: click.Context, context_dir: Path | None) -> None:
    """Build the development image with Rust, maturin and Python."""
    cli_ctx = get_cli_context(ctx)
    settings = load_settings_or_exit(load_container_settings, cli_ctx.config)
    directory = (context_dir or Path.cwd()).resolve()

    dockerfile = directory / settings.dockerfile
    if not dockerfile.is_file():
        click.echo(f"Error: {dockerfile} not found", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND)

    with lib_log_rich.runtime.bind(job_id="cli-container-build", extra={"image": settings.image}):
        logger.info("Building container image")
        run_or_exit(cli_ctx, build_image_command(settings, directory), cwd=directory, label="Container build")


@click.command("container-run", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@click.option(
    "--project",
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory mounted into the container (defaults to the current directory)",
)
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli_container_run(ctx: click.Context, project_dir: Path | None, command: tuple[str, ...]) -> None:
    """Start an interactive session with the project bind-mounted.

    Any arguments are run inside the container instead of its default shell.

    Example:
        extkit container-run
        extkit container-run maturin develop --release
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings_or_exit(load_container_settings, cli_ctx.config)
    directory = (project_dir or Path.cwd()).resolve()

    with lib_log_rich.runtime.bind(job_id="cli-container-run", extra={"image": settings.image}):
        logger.info("Starting container session", extra={"mount": str(directory)})
        run_or_exit(
            cli_ctx,
            build_run_command(settings, directory, command=command),
            cwd=directory,
            label="Container run",
        )


__all__ = ["cli_container_build", "cli_container_run"]
