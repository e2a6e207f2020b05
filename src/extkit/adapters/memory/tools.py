"""In-memory process adapter for testing.

Contents:
    * :class:`ToolSpy` - Records command lines instead of running them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import ToolNotFoundError


def _empty_call_list() -> list[tuple[list[str], Path]]:
    return []


@dataclass
class ToolSpy:
    """Captures ``run_tool`` calls for test assertions.

    Attributes:
        calls: Recorded ``(command, cwd)`` pairs in call order.
        exit_code: Exit code returned by every simulated run.
        missing: Executables reported as absent from ``PATH``.

    Example:
        >>> spy = ToolSpy()
        >>> spy.run_tool(["maturin", "develop"], cwd=Path("/proj"))
        0
        >>> spy.commands
        [['maturin', 'develop']]
        >>> ToolSpy(missing={"docker"}).run_tool(["docker", "build"], cwd=Path("."))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        extkit.domain.errors.ToolNotFoundError: Executable 'docker' not found on PATH
    """

    calls: list[tuple[list[str], Path]] = field(default_factory=_empty_call_list)
    exit_code: int = 0
    missing: set[str] = field(default_factory=set)

    @property
    def commands(self) -> list[list[str]]:
        """Recorded command lines without their working directories."""
        return [command for command, _cwd in self.calls]

    def clear(self) -> None:
        """Reset captured calls for the next test."""
        self.calls.clear()

    def run_tool(self, command: Sequence[str], *, cwd: Path) -> int:
        """Record the call and return :attr:`exit_code`."""
        if not command:
            raise ValueError("command must not be empty")
        if command[0] in self.missing:
            raise ToolNotFoundError(command[0])
        self.calls.append((list(command), cwd))
        return self.exit_code


__all__ = [
    "ToolSpy",
]
