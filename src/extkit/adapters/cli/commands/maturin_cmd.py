"""CLI commands delegating to maturin: ``new``, ``develop`` and ``deploy``.

These are the three manual steps of the extension workflow:

1. ``extkit new sample`` scaffolds a PyO3 crate with a Python module.
2. ``extkit develop`` compiles it and installs it into the active virtualenv.
3. ``extkit deploy`` publishes the built wheels to a package index.

Defaults come from the ``[maturin]`` configuration section; options given
on the command line win.

Contents:
    * :func:`cli_new` - Scaffold a new extension project.
    * :func:`cli_develop` - Build and install into the current environment.
    * :func:`cli_deploy` - Publish wheels.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from extkit.adapters.maturin.commands import (
    build_deploy_command,
    build_develop_command,
    build_new_command,
    load_maturin_settings,
)
from extkit.domain.enums import Bindings

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import load_settings_or_exit, run_or_exit

logger = logging.getLogger(__name__)


def _split_extras(values: tuple[str, ...]) -> list[str]:
    """Flatten ``--extras a,b --extras c`` into ``["a", "b", "c"]``."""
    return [item.strip() for value in values for item in value.split(",") if item.strip()]


@click.command("new", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--bindings",
    "-b",
    type=click.Choice([b.value for b in Bindings], case_sensitive=False),
    default=None,
    help="Binding flavour (defaults to [maturin] bindings, normally pyo3)",
)
@click.option("--name", type=str, default=None, help="Package name, if different from the directory name")
@click.option("--mixed", is_flag=True, default=False, help="Create a mixed Rust/Python project layout")
@click.pass_context
def cli_new(ctx: click.Context, path: Path, bindings: str | None, name: str | None, mixed: bool) -> None:
    """Scaffold a new native extension project at PATH with ``maturin new``.

    Example:
        extkit new sample
        extkit new --bindings cffi --name fastmath libs/fastmath
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings_or_exit(load_maturin_settings, cli_ctx.config)
    chosen = Bindings(bindings.lower()) if bindings else None

    with lib_log_rich.runtime.bind(job_id="cli-new", extra={"command": "new", "path": str(path)}):
        logger.info("Scaffolding extension project", extra={"bindings": (chosen or settings.bindings).value})
        command = build_new_command(settings, path, name=name, bindings=chosen, mixed=mixed)
        run_or_exit(cli_ctx, command, cwd=Path.cwd(), label="New")
        click.echo(f"Created {path}. Next: cd {path} && extkit develop")


@click.command("develop", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--release/--debug",
    default=None,
    help="Build optimised artifacts (defaults to [maturin] release)",
)
@click.option(
    "--extras",
    "-E",
    multiple=True,
    default=(),
    help="Extras to install alongside the extension (repeatable or comma separated)",
)
@click.pass_context
def cli_develop(ctx: click.Context, release: bool | None, extras: tuple[str, ...]) -> None:
    """Build the extension and install it into the active virtualenv.

    Run from the project root created by ``extkit new``.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings_or_exit(load_maturin_settings, cli_ctx.config)

    with lib_log_rich.runtime.bind(job_id="cli-develop", extra={"command": "develop"}):
        logger.info("Building extension in place")
        command = build_develop_command(settings, release=release, extras=_split_extras(extras))
        run_or_exit(cli_ctx, command, cwd=Path.cwd(), label="Develop")


@click.command("deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--repository",
    "-r",
    type=str,
    default=None,
    help="Target repository name (defaults to [maturin] repository)",
)
@click.option(
    "--skip-existing/--no-skip-existing",
    default=None,
    help="Continue when a file already exists on the repository",
)
@click.pass_context
def cli_deploy(ctx: click.Context, repository: str | None, skip_existing: bool | None) -> None:
    """Build wheels and publish them with ``maturin publish``.

    Credentials are read by maturin itself (``MATURIN_PYPI_TOKEN`` or
    ``~/.pypirc``); extkit never handles them.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings_or_exit(load_maturin_settings, cli_ctx.config)
    target = repository or settings.repository

    with lib_log_rich.runtime.bind(job_id="cli-deploy", extra={"command": "deploy", "repository": target}):
        logger.info("Publishing extension wheels")
        command = build_deploy_command(settings, repository=repository, skip_existing=skip_existing)
        run_or_exit(cli_ctx, command, cwd=Path.cwd(), label="Deploy")


__all__ = ["cli_deploy", "cli_develop", "cli_new"]
