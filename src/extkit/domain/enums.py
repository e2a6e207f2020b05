"""Type-safe domain enums for output formats and binding kinds."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Bindings(str, Enum):
    """Binding flavours understood by ``maturin new --bindings``.

    Attributes:
        PYO3: Rust crate exposing a Python module through PyO3.
        CFFI: C ABI library loaded through cffi.
        UNIFFI: Mozilla uniffi generated bindings.
        BIN: Plain Rust binary packaged as a wheel.

    Example:
        >>> Bindings("pyo3") is Bindings.PYO3
        True
        >>> [b.value for b in Bindings]
        ['pyo3', 'cffi', 'uniffi', 'bin']
    """

    PYO3 = "pyo3"
    CFFI = "cffi"
    UNIFFI = "uniffi"
    BIN = "bin"


__all__ = [
    "Bindings",
    "OutputFormat",
]
