"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

import math

from .errors import SupplyReadingError

CANONICAL_GREETING = "✨ Hello, world!"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    The sample function every freshly scaffolded extension starts with.
    Deterministic, so documentation, smoke tests, and packaging checks
    can rely on it.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        '✨ Hello, world!'
    """
    return CANONICAL_GREETING


def reverse_text(text: str) -> str:
    """Return *text* with its character order reversed.

    Operates on code points, so multi-byte characters survive intact.

    Example:
        >>> reverse_text("abc")
        'cba'
        >>> reverse_text("")
        ''
        >>> reverse_text(reverse_text("héllo")) == "héllo"
        True
    """
    return text[::-1]


SUPPLY_UNKNOWN = (-1, -1)
SUPPLY_NONE = (0, 0)

_SUPPLY_LEVELS = {"l": 1, "m": 2, "h": 3, "?": -1}
_MAX_SUPPLY_UNITS = 2**31 - 1


def parse_supply_level(reading: str) -> tuple[int, int]:
    """Parse a market supply reading into ``(units, level)``.

    Accepted forms are ``?`` (unknown, ``(-1, -1)``), ``-`` or ``0``
    (nothing, ``(0, 0)``), and ``<units><level>`` where level is one of
    ``l``/``m``/``h`` (1, 2, 3, case-insensitive) or ``?`` (-1).

    Raises:
        SupplyReadingError: With one of the fixed messages below when the
            reading does not match any accepted form.

    Examples:
        >>> parse_supply_level("424242m")
        (424242, 2)
        >>> parse_supply_level("1000L")
        (1000, 1)
        >>> parse_supply_level("0?")
        (0, -1)
        >>> parse_supply_level("-")
        (0, 0)
        >>> parse_supply_level("00")
        Traceback (most recent call last):
        ...
        extkit.domain.errors.SupplyReadingError: missing level-suffix in supply reading
    """
    if len(reading) > 1:
        if reading[0] not in "0123456789":
            raise SupplyReadingError("malformed supply reading")
        digits, suffix = reading[:-1], reading[-1].lower()
        if not (digits.isascii() and digits.isdigit()) or int(digits) > _MAX_SUPPLY_UNITS:
            raise SupplyReadingError("invalid number in supply reading")
        if suffix in "0123456789":
            raise SupplyReadingError("missing level-suffix in supply reading")
        if suffix not in _SUPPLY_LEVELS:
            raise SupplyReadingError("invalid unit in supply reading")
        return int(digits), _SUPPLY_LEVELS[suffix]

    if reading == "?":
        return SUPPLY_UNKNOWN
    if reading in ("-", "0"):
        return SUPPLY_NONE
    if not reading:
        raise SupplyReadingError("empty supply reading")
    raise SupplyReadingError("invalid supply reading")


GRID_CELL_SIZE = 32.0
_I16_MIN, _I16_MAX = -(2**15), 2**15 - 1
_U64_MASK = 2**64 - 1


def stellar_grid_key_component(coordinate: float) -> int:
    """Return the signed 16-bit grid cell containing *coordinate*.

    Cells are :data:`GRID_CELL_SIZE` wide; non-negative coordinates start at
    cell 0, negative ones at -1. Values beyond the 16-bit range saturate and
    NaN maps to 0.

    Examples:
        >>> stellar_grid_key_component(31.9999), stellar_grid_key_component(32.0)
        (0, 1)
        >>> stellar_grid_key_component(-32.0), stellar_grid_key_component(-32.000000001)
        (-1, -2)
    """
    if math.isnan(coordinate):
        return 0
    cell = min(max(coordinate / GRID_CELL_SIZE, float(_I16_MIN)), float(_I16_MAX))
    return math.floor(cell)


def stellar_grid_key(x: float, y: float, z: float) -> int:
    """Pack the grid cells of a position into one unsigned 64-bit key.

    Layout: ``y`` sign-extended into the upper 32 bits, then ``x`` and
    ``z`` as unsigned 16-bit words. ``y`` leads so that keys sort by
    galactic north/south first.

    Examples:
        >>> stellar_grid_key(0.0, 0.0, 0.0)
        0
        >>> hex(stellar_grid_key(-33.0, -65.0, -97.0))
        '0xfffffffdfffefffc'
        >>> stellar_grid_key(-1.0, -1.0, -1.0) == 2**64 - 1
        True
    """
    gy = stellar_grid_key_component(y)
    gx = stellar_grid_key_component(x) & 0xFFFF
    gz = stellar_grid_key_component(z) & 0xFFFF
    return ((gy << 32) | (gx << 16) | gz) & _U64_MASK


__all__ = [
    "CANONICAL_GREETING",
    "GRID_CELL_SIZE",
    "SUPPLY_NONE",
    "SUPPLY_UNKNOWN",
    "build_greeting",
    "parse_supply_level",
    "reverse_text",
    "stellar_grid_key",
    "stellar_grid_key_component",
]
