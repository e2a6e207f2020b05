"""Run external build and container tools as child processes.

The child inherits stdin/stdout/stderr so interactive sessions
(``docker run -it``) and maturin's progress output reach the terminal
unchanged.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from extkit.domain.errors import ToolNotFoundError

logger = logging.getLogger(__name__)


def normalize_returncode(code: int) -> int:
    """Convert negative signal return codes to POSIX 128+N convention.

    Python's ``subprocess`` reports signal-killed processes as negative values
    (e.g., -2 for SIGINT). POSIX convention is 128+N (e.g., 130 for SIGINT).

    Example:
        >>> normalize_returncode(-2)
        130
        >>> normalize_returncode(3)
        3
    """
    if code < 0:
        return 128 + abs(code)
    return code


def run_tool(command: Sequence[str], *, cwd: Path) -> int:
    """Execute *command* in *cwd* and return its exit code.

    Args:
        command: Full argument vector; ``command[0]`` is resolved on ``PATH``.
        cwd: Working directory for the child process.

    Returns:
        POSIX-conventional exit code of the child.

    Raises:
        ValueError: If *command* is empty.
        ToolNotFoundError: If ``command[0]`` cannot be resolved.
    """
    if not command:
        raise ValueError("command must not be empty")

    executable = shutil.which(command[0])
    if executable is None:
        raise ToolNotFoundError(command[0])

    argv = [executable, *command[1:]]
    logger.debug("Running %s in %s", " ".join(command), cwd)
    result = subprocess.run(argv, cwd=cwd, check=False)  # noqa: S603
    code = normalize_returncode(result.returncode)
    if code != 0:
        logger.warning("%s exited with code %d", command[0], code, extra={"argv": list(command)})
    return code


__all__ = [
    "normalize_returncode",
    "run_tool",
]
