"""Supply reading stories: accepted forms and the fixed error messages."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from extkit.domain.behaviors import parse_supply_level
from extkit.domain.errors import SupplyReadingError


@pytest.mark.os_agnostic
def test_question_mark_means_unknown() -> None:
    assert parse_supply_level("?") == (-1, -1)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("reading", ["-", "0"])
def test_dash_and_zero_mean_no_supply(reading: str) -> None:
    assert parse_supply_level(reading) == (0, 0)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("reading", "expected"),
    [
        ("0?", (0, -1)),
        ("10l", (10, 1)),
        ("1000L", (1000, 1)),
        ("424242?", (424242, -1)),
        ("424242l", (424242, 1)),
        ("424242m", (424242, 2)),
        ("424242h", (424242, 3)),
        ("2134567891L", (2134567891, 1)),
        ("2134567891M", (2134567891, 2)),
        ("2134567891H", (2134567891, 3)),
        ("0042m", (42, 2)),
    ],
)
def test_units_with_level_suffix(reading: str, expected: tuple[int, int]) -> None:
    """The level suffix is case-insensitive; leading zeros are allowed."""
    assert parse_supply_level(reading) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("reading", "message"),
    [
        ("0:?", "invalid number in supply reading"),
        ("0123123.m", "invalid number in supply reading"),
        ("9999999999999999999m", "invalid number in supply reading"),
        ("2147483648m", "invalid number in supply reading"),
        ("00", "missing level-suffix in supply reading"),
        ("12x", "invalid unit in supply reading"),
        ("?m", "malformed supply reading"),
        ("-5l", "malformed supply reading"),
        ("!", "invalid supply reading"),
        ("a", "invalid supply reading"),
        ("1", "invalid supply reading"),
        ("", "empty supply reading"),
    ],
)
def test_malformed_readings_raise_fixed_messages(reading: str, message: str) -> None:
    with pytest.raises(SupplyReadingError) as exc:
        parse_supply_level(reading)

    assert str(exc.value) == message


@pytest.mark.os_agnostic
def test_supply_reading_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="empty supply reading"):
        parse_supply_level("")


@pytest.mark.os_agnostic
@given(units=st.integers(min_value=0, max_value=2**31 - 1), suffix=st.sampled_from("lLmMhH?"))
def test_formatted_readings_parse_back(units: int, suffix: str) -> None:
    """Any in-range unit count followed by a level suffix parses to that count."""
    parsed_units, level = parse_supply_level(f"{units}{suffix}")

    assert parsed_units == units
    assert level == {"l": 1, "m": 2, "h": 3, "?": -1}[suffix.lower()]


@pytest.mark.os_agnostic
@given(reading=st.text(max_size=12))
def test_parser_either_returns_a_pair_or_raises_supply_error(reading: str) -> None:
    try:
        units, level = parse_supply_level(reading)
    except SupplyReadingError:
        return
    assert units >= -1
    assert level in (-1, 0, 1, 2, 3)
