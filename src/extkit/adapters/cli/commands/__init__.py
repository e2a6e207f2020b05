"""CLI command implementations.

Contents:
    * Sample commands from :mod:`.info`
    * maturin workflow commands from :mod:`.maturin_cmd`
    * Container commands from :mod:`.container_cmd`
    * Prerequisite report from :mod:`.doctor_cmd`
    * Trade-data helpers from :mod:`.trade_cmd`
    * Configuration display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .container_cmd import cli_container_build, cli_container_run
from .doctor_cmd import cli_doctor
from .info import cli_count_lines, cli_hello, cli_info, cli_tac
from .maturin_cmd import cli_deploy, cli_develop, cli_new
from .trade_cmd import cli_grid_key, cli_parse_supply

__all__ = [
    "cli_config",
    "cli_container_build",
    "cli_container_run",
    "cli_count_lines",
    "cli_deploy",
    "cli_develop",
    "cli_doctor",
    "cli_grid_key",
    "cli_hello",
    "cli_info",
    "cli_new",
    "cli_parse_supply",
    "cli_tac",
]
