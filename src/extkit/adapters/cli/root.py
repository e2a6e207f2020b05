"""Root CLI command group and global option handling.

Defines the top-level Click group all subcommands hang off, and the
global ``--traceback``, ``--profile`` and ``--set`` flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from extkit import __init__conf__
from extkit.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from extkit.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load config for *profile* and apply ``--set`` overrides.

    Raises:
        click.UsageError: If the profile name or an override is malformed.
    """
    try:
        config = services.get_config(profile=profile)
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


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
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'container', 'ci')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve services, configuration and logging once for every subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from extkit.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["hello"], obj=build_testing)
        >>> result.exit_code
        0
    """
    # ctx.obj is the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from this package's ancestors.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_container_build,
        cli_container_run,
        cli_count_lines,
        cli_deploy,
        cli_develop,
        cli_doctor,
        cli_grid_key,
        cli_hello,
        cli_info,
        cli_new,
        cli_parse_supply,
        cli_tac,
    )

    for cmd in (
        cli_info,
        cli_hello,
        cli_tac,
        cli_count_lines,
        cli_parse_supply,
        cli_grid_key,
        cli_new,
        cli_develop,
        cli_deploy,
        cli_container_build,
        cli_container_run,
        cli_doctor,
        cli_config,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
