"""Trade-data CLI commands: market supply readings and stellar grid keys.

Contents:
    * :func:`cli_parse_supply` - Decode supply readings into units and level.
    * :func:`cli_grid_key` - Compute the 64-bit grid key of a position.

Both commands accept negative numbers and ``-`` as positional arguments.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from extkit.domain.behaviors import parse_supply_level, stellar_grid_key
from extkit.domain.enums import OutputFormat
from extkit.domain.errors import SupplyReadingError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_POSITIONAL_NUMBERS_SETTINGS = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}


@click.command("parse-supply", context_settings=_POSITIONAL_NUMBERS_SETTINGS)
@click.argument("readings", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
def cli_parse_supply(readings: tuple[str, ...], output_format: str) -> None:
    """Decode each supply READING such as ``1200m``, ``?`` or ``-``.

    Units are printed with the level: 1 low, 2 medium, 3 high, -1 unknown.
    The first malformed reading aborts with exit code 22.

    Example:
        extkit parse-supply 1200m 35L ?
    """
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-parse-supply", extra={"command": "parse-supply"}):
        logger.info("Parsing %d supply reading(s)", len(readings))
        parsed: list[dict[str, object]] = []
        for reading in readings:
            try:
                units, level = parse_supply_level(reading)
            except SupplyReadingError as exc:
                click.echo(f"Error: {reading!r}: {exc}", err=True)
                raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
            parsed.append({"reading": reading, "units": units, "level": level})

        if fmt is OutputFormat.JSON:
            click.echo(orjson.dumps(parsed).decode())
            return
        for entry in parsed:
            click.echo(f"{entry['reading']}\tunits={entry['units']}\tlevel={entry['level']}")


@click.command("grid-key", context_settings=_POSITIONAL_NUMBERS_SETTINGS)
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("z", type=float)
@click.option("--hex", "as_hex", is_flag=True, default=False, help="Print the key as 16 hex digits")
def cli_grid_key(x: float, y: float, z: float, as_hex: bool) -> None:
    """Print the stellar grid key for the position X Y Z.

    Example:
        extkit grid-key --hex -- -33 -65 -97
    """
    key = stellar_grid_key(x, y, z)
    logger.debug("Grid key for (%s, %s, %s) is %d", x, y, z, key)
    click.echo(f"0x{key:016x}" if as_hex else str(key))


__all__ = ["cli_grid_key", "cli_parse_supply"]
