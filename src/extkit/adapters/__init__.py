"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.container` - Container image and session command lines
    * :mod:`.files` - Whole-file text helpers (``tac``)
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.maturin` - maturin command lines
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.tools` - External process execution and prerequisite checks
"""

from __future__ import annotations

__all__: list[str] = []
