"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# File services
from ..adapters.files.reader import count_file_lines, tac

# Logging services
from ..adapters.logging.setup import init_logging

# Process services
from ..adapters.tools.runner import run_tool

# Each adapter must structurally satisfy its Protocol; pyright checks these.
if TYPE_CHECKING:
    from ..adapters.memory.files import FileStore
    from ..adapters.memory.tools import ToolSpy
    from ..application.ports import (
        CountLines,
        DisplayConfig,
        GetConfig,
        InitLogging,
        ReverseFile,
        RunTool,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_run_tool: RunTool = run_tool
    _assert_tac: ReverseFile = tac
    _assert_count_lines: CountLines = count_file_lines


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    run_tool: RunTool
    tac: ReverseFile
    count_lines: CountLines


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        run_tool=run_tool,
        tac=tac,
        count_lines=count_file_lines,
    )


def build_testing(*, spy: ToolSpy | None = None, files: FileStore | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: ToolSpy capturing command lines. A fresh one is created when
            None; pass your own to assert on recorded commands.
        files: FileStore serving file contents. An empty store, where
            every path is missing, is used when None.
    """
    from ..adapters.memory import (
        FileStore,
        ToolSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    tool_spy = spy if spy is not None else ToolSpy()
    file_store = files if files is not None else FileStore()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        run_tool=tool_spy.run_tool,
        tac=file_store.tac,
        count_lines=file_store.count_lines,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Files
    "count_file_lines",
    "tac",
    # Logging
    "init_logging",
    # Processes
    "run_tool",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
