"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that touch no
filesystem, spawn no processes, and configure no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.files` - In-memory file reader (FileStore class)
    * :mod:`.tools` - In-memory process runner (ToolSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .files import FileStore
from .logging import init_logging_in_memory
from .tools import ToolSpy

if TYPE_CHECKING:
    from extkit.application.ports import CountLines, DisplayConfig, GetConfig, InitLogging, ReverseFile

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_tac: ReverseFile = FileStore().tac
    _assert_count_lines: CountLines = FileStore().count_lines

__all__ = [
    "FileStore",
    "ToolSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
