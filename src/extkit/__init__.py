"""Public package surface exposing the sample functions, metadata, and configuration.

- Domain exports: ``greeting``, ``parse_supply_level``, ``stellar_grid_key``
- Composition exports: ``tac``, ``count_file_lines`` and ``get_config``
- Metadata: ``print_info``
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import count_file_lines, get_config, tac

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    parse_supply_level,
    reverse_text,
    stellar_grid_key,
)

greeting = build_greeting

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "count_file_lines",
    "get_config",
    "greeting",
    "parse_supply_level",
    "print_info",
    "reverse_text",
    "stellar_grid_key",
    "tac",
]
