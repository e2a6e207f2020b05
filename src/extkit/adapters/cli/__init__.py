"""CLI package providing the command-line interface.

Re-exports the root group, entry point, traceback helpers and commands so
consumers stay insulated from the internal module layout.
"""

from __future__ import annotations

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
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
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
