r"""Read text files and hand their content to domain behaviors.

``tac`` buffers the file whole and reads it without newline translation,
so ``\r\n`` pairs come back as ``\n\r``. ``count_file_lines`` streams the
file in binary chunks.
I/O failures are not translated here. ``FileNotFoundError`` and friends
reach the caller unchanged so the CLI boundary can map them to exit codes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from extkit.domain.behaviors import reverse_text

logger = logging.getLogger(__name__)


def tac(filename: str | os.PathLike[str]) -> str:
    """Return the content of *filename* with its character order reversed.

    Args:
        filename: Path of a UTF-8 text file.

    Returns:
        The whole file content, reversed.

    Raises:
        FileNotFoundError: If *filename* does not exist.
        PermissionError: If *filename* cannot be opened for reading.
        IsADirectoryError: If *filename* names a directory.
        UnicodeDecodeError: If the content is not valid UTF-8.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     sample = Path(tmp) / "sample.txt"
        ...     _ = sample.write_text("abc", encoding="utf-8")
        ...     tac(sample)
        'cba'
    """
    with Path(filename).open(encoding="utf-8", newline="") as handle:
        text = handle.read()
    logger.info("'%s' has been read, returning its content, reversed", filename, extra={"chars": len(text)})
    return reverse_text(text)


READ_BUFFER_SIZE = 128 * 1024


def count_file_lines(filename: str | os.PathLike[str]) -> int:
    """Count the ``\\n`` bytes in *filename*.

    The file is read in binary chunks of :data:`READ_BUFFER_SIZE`, so any
    encoding and any file size is fine. A final line without a trailing
    newline is not counted.

    Raises:
        FileNotFoundError: If *filename* does not exist.
        PermissionError: If *filename* cannot be opened for reading.
        IsADirectoryError: If *filename* names a directory.
    """
    count = 0
    with Path(filename).open("rb") as handle:
        while True:
            chunk = handle.read(READ_BUFFER_SIZE)
            if not chunk:
                break
            count += chunk.count(b"\n")
    logger.info("'%s' has %d newline(s)", filename, count)
    return count


__all__ = ["READ_BUFFER_SIZE", "count_file_lines", "tac"]
