"""In-memory file adapter for testing.

Contents:
    * :class:`FileStore` - Serves file contents from a dict instead of disk.
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field

from ...domain.behaviors import reverse_text


def _empty_contents() -> dict[str, str]:
    return {}


def _empty_failures() -> dict[str, OSError]:
    return {}


@dataclass
class FileStore:
    """Maps paths to text so file ports run without touching the disk.

    Paths are looked up by ``os.fspath``. Unknown paths raise
    ``FileNotFoundError`` like a real filesystem would.

    Attributes:
        contents: Text served for each known path.
        failures: Errors raised instead of reading, keyed by path.
        reads: Paths requested so far, in call order.

    Example:
        >>> store = FileStore({"notes.txt": "ab\\ncd\\n"})
        >>> store.tac("notes.txt")
        '\\ndc\\nba'
        >>> store.count_lines("notes.txt")
        2
        >>> store.tac("missing.txt")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        FileNotFoundError: [Errno 2] No such file or directory: 'missing.txt'
    """

    contents: dict[str, str] = field(default_factory=_empty_contents)
    failures: dict[str, OSError] = field(default_factory=_empty_failures)
    reads: list[str] = field(default_factory=list)

    def _read(self, filename: str | os.PathLike[str]) -> str:
        path = os.fspath(filename)
        self.reads.append(path)
        if path in self.failures:
            raise self.failures[path]
        if path not in self.contents:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return self.contents[path]

    def tac(self, filename: str | os.PathLike[str]) -> str:
        """Return the stored text for *filename*, reversed."""
        return reverse_text(self._read(filename))

    def count_lines(self, filename: str | os.PathLike[str]) -> int:
        """Count the newlines in the stored text for *filename*."""
        return self._read(filename).count("\n")


__all__ = ["FileStore"]
