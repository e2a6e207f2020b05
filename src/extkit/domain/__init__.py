"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Core domain behaviors (greeting, text reversal,
      supply readings, stellar grid keys)
    * :mod:`.enums` - Domain enumerations (OutputFormat, Bindings)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
    parse_supply_level,
    reverse_text,
    stellar_grid_key,
)
from .enums import Bindings, OutputFormat
from .errors import ConfigurationError, SupplyReadingError, ToolNotFoundError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    "parse_supply_level",
    "reverse_text",
    "stellar_grid_key",
    # Enums
    "Bindings",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "SupplyReadingError",
    "ToolNotFoundError",
]
