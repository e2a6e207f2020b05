"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    CountLines,
    DisplayConfig,
    GetConfig,
    InitLogging,
    ReverseFile,
    RunTool,
)

__all__ = [
    "CountLines",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "ReverseFile",
    "RunTool",
]
