"""External tool adapter - process execution and prerequisite checks.

Contents:
    * :mod:`.runner` - Run maturin/docker command lines
    * :mod:`.prerequisites` - Report which external tools are installed
"""

from __future__ import annotations

from .prerequisites import ToolCheck, check_prerequisites, format_prerequisites_report, install_hint
from .runner import normalize_returncode, run_tool

__all__ = [
    "ToolCheck",
    "check_prerequisites",
    "format_prerequisites_report",
    "install_hint",
    "normalize_returncode",
    "run_tool",
]
