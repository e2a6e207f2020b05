"""File adapters: read files from disk and hand their content to the domain.

Contents:
    * :func:`.reader.tac` - Read a file and return its content reversed
    * :func:`.reader.count_file_lines` - Count newlines in a file of any size
"""

from __future__ import annotations

from .reader import count_file_lines, tac

__all__ = ["count_file_lines", "tac"]
