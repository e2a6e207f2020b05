"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into its settings
    model. Caught at CLI boundaries to provide a readable message.

    Example:
        >>> from extkit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[maturin] bindings must be one of pyo3, cffi, uniffi, bin")
        >>> str(err)
        '[maturin] bindings must be one of pyo3, cffi, uniffi, bin'
    """


class ToolNotFoundError(FileNotFoundError):
    """An external executable (maturin, docker, ...) is not on ``PATH``.

    Inherits from FileNotFoundError so generic I/O handlers still treat it
    as a missing file.

    Attributes:
        tool: Executable name that could not be resolved.

    Example:
        >>> err = ToolNotFoundError("maturin")
        >>> err.tool
        'maturin'
        >>> str(err)
        "Executable 'maturin' not found on PATH"
        >>> isinstance(err, FileNotFoundError)
        True
    """

    def __init__(self, tool: str) -> None:
        super().__init__(f"Executable {tool!r} not found on PATH")
        self.tool = tool


class SupplyReadingError(ValueError):
    """A market supply reading does not match any accepted form.

    The message is one of a fixed set (for example
    ``"invalid unit in supply reading"``) so callers may match on it.
    """


__all__ = [
    "ConfigurationError",
    "SupplyReadingError",
    "ToolNotFoundError",
]
