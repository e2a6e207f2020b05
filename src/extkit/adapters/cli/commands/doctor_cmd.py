"""CLI command reporting which external tools are installed."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from extkit.adapters.container.commands import load_container_settings
from extkit.adapters.maturin.commands import load_maturin_settings
from extkit.adapters.tools.prerequisites import check_prerequisites, format_prerequisites_report

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_settings_or_exit

logger = logging.getLogger(__name__)


@click.command("doctor", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_doctor(ctx: click.Context) -> None:
    """Check that maturin, the Rust toolchain and the container engine are available.

    Exits with 69 (EX_UNAVAILABLE) when anything is missing.
    """
    cli_ctx = get_cli_context(ctx)
    maturin = load_settings_or_exit(load_maturin_settings, cli_ctx.config)
    container = load_settings_or_exit(load_container_settings, cli_ctx.config)

    with lib_log_rich.runtime.bind(job_id="cli-doctor", extra={"command": "doctor"}):
        results = check_prerequisites(maturin=maturin.executable, engine=container.engine)
        click.echo(format_prerequisites_report(results))
        missing = [tool.name for tool in results if not tool.found]
        if missing:
            logger.warning("Missing prerequisites: %s", ", ".join(missing))
            raise SystemExit(ExitCode.TOOL_UNAVAILABLE)


__all__ = ["cli_doctor"]
