"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the corresponding adapter function,
so plain module-level functions satisfy it structurally (PEP 544).
``Config`` is imported under ``TYPE_CHECKING`` only to keep the
application layer free of infrastructure imports at runtime.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class RunTool(Protocol):
    """Run an external command line and return its exit code."""

    def __call__(self, command: Sequence[str], *, cwd: Path) -> int: ...


class ReverseFile(Protocol):
    """Read a text file and return its content reversed."""

    def __call__(self, filename: str | os.PathLike[str]) -> str: ...


class CountLines(Protocol):
    """Count the newlines in a file."""

    def __call__(self, filename: str | os.PathLike[str]) -> int: ...


__all__ = [
    "CountLines",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "ReverseFile",
    "RunTool",
]
