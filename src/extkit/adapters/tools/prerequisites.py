"""Prerequisite tool checking for ``extkit doctor``.

Verifies the external tools the extension workflow relies on are present
and formats installation instructions for any that are missing.

Contents:
    * :class:`ToolCheck` - Frozen result of a single tool presence check.
    * :func:`check_prerequisites` - Check all platform-appropriate prerequisites.
    * :func:`format_prerequisites_report` - Format results as human-readable summary.
"""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass

_RUSTUP_HINT = "https://rustup.rs (curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh)"


@dataclass(frozen=True, slots=True)
class ToolCheck:
    """Result of checking whether a single external tool is available."""

    name: str
    found: bool
    install_hint: str


def _is_macos() -> bool:
    return sys.platform == "darwin"


def _check_tool_on_path(name: str) -> bool:
    return shutil.which(name) is not None


def _engine_hint(engine: str) -> str:
    if engine == "podman":
        return "brew install podman" if _is_macos() else "sudo apt install podman"
    return "https://docs.docker.com/engine/install/"


def install_hint(name: str) -> str:
    """Return how to install the executable *name*.

    Example:
        >>> install_hint("maturin")
        'pip install maturin'
    """
    if name in ("cargo", "rustc"):
        return _RUSTUP_HINT
    if name in ("docker", "podman"):
        return _engine_hint(name)
    if name == "maturin":
        return "pip install maturin"
    return f"install {name} and make sure it is on PATH"


def check_prerequisites(*, maturin: str = "maturin", engine: str = "docker") -> list[ToolCheck]:
    """Check the build and container tools used by extkit commands.

    Args:
        maturin: Executable name configured for maturin.
        engine: Container engine executable (docker or podman).
    """
    return [
        ToolCheck(name=name, found=_check_tool_on_path(name), install_hint=install_hint(name))
        for name in (maturin, "cargo", "rustc", engine)
    ]


def format_prerequisites_report(results: list[ToolCheck]) -> str:
    """Format check results as a human-readable summary.

    Example:
        >>> print(format_prerequisites_report([ToolCheck("cargo", True, "rustup")]))
        Prerequisites:
          ✓ cargo
    """
    lines = ["Prerequisites:"]
    for tool in results:
        if tool.found:
            lines.append(f"  ✓ {tool.name}")
        else:
            lines.append(f"  ✗ {tool.name}: not found")
            lines.append(f"      Install: {tool.install_hint}")
    return "\n".join(lines)


__all__ = [
    "ToolCheck",
    "check_prerequisites",
    "format_prerequisites_report",
    "install_hint",
]
