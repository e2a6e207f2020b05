"""Console script entry point with production wiring.

Lives at package level, outside ``adapters``, so it can hand the
composition root to the CLI without the adapters importing composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``extkit`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
