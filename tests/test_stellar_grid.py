"""Stellar grid stories: cell boundaries and 64-bit key layout."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from extkit.domain.behaviors import stellar_grid_key, stellar_grid_key_component

ALL_ONES = 2**64 - 1


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("coordinate", "cell"),
    [
        (0.0, 0),
        (-0.0, 0),
        (1.0, 0),
        (2.0, 0),
        (16.0, 0),
        (31.9999, 0),
        (32.0, 1),
        (63.9999999999, 1),
        (64.0, 2),
        (-0.00001, -1),
        (-1.0, -1),
        (-2.0, -1),
        (-16.0, -1),
        (-31.9999, -1),
        (-32.0, -1),
        (-32.000000001, -2),
        (-63.9999999999, -2),
        (-64.0, -2),
        (-64.0000001, -3),
    ],
)
def test_component_floors_into_32_unit_cells(coordinate: float, cell: int) -> None:
    """Non-negative coordinates start at cell 0, negative ones at -1."""
    assert stellar_grid_key_component(coordinate) == cell


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("coordinate", "cell"),
    [(1e9, 32767), (-1e9, -32768), (math.inf, 32767), (-math.inf, -32768), (math.nan, 0)],
)
def test_component_saturates_outside_the_16_bit_range(coordinate: float, cell: int) -> None:
    assert stellar_grid_key_component(coordinate) == cell


@pytest.mark.os_agnostic
def test_origin_has_key_zero() -> None:
    assert stellar_grid_key(0.0, 0.0, 0.0) == 0


@pytest.mark.os_agnostic
def test_minus_one_cell_on_every_axis_sets_every_bit() -> None:
    assert stellar_grid_key(-1.0, -1.0, -1.0) == ALL_ONES
    assert stellar_grid_key(-32.0, -32.0, -32.0) == ALL_ONES


@pytest.mark.os_agnostic
@pytest.mark.parametrize("position", [(1.0, 1.0, 1.0), (31.0, 31.0, 31.0)])
def test_positions_inside_the_first_cell_share_key_zero(position: tuple[float, float, float]) -> None:
    assert stellar_grid_key(*position) == 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "position",
    [(0, 0, 32), (0, 32, 0), (0, 32, 32), (32, 0, 0), (32, 0, 32), (32, 32, 0), (32, 32, 32)],
)
def test_leaving_the_first_cell_changes_the_key(position: tuple[float, float, float]) -> None:
    assert stellar_grid_key(*position) != 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "position",
    [
        (-0.0, -0.0, -32.1),
        (-0.0, -32.1, -0.0),
        (-0.0, -32.1, -321.0),
        (-32.1, -0.0, -0.0),
        (-32.1, -0.0, -321.0),
        (-32.1, -32.1, -0.0),
        (-32.1, -32.1, -32.1),
    ],
)
def test_leaving_the_minus_one_cell_changes_the_key(position: tuple[float, float, float]) -> None:
    assert stellar_grid_key(*position) != ALL_ONES


@pytest.mark.os_agnostic
def test_positive_key_layout_is_y_then_x_then_z() -> None:
    key = stellar_grid_key(32.0, 64.0, 96.0)

    assert (key >> 32) & 0xFFFF == 2
    assert (key >> 16) & 0xFF == 1
    assert key & 0xFF == 3


@pytest.mark.os_agnostic
def test_negative_key_sign_extends_y_only() -> None:
    """Cells (-2, -3, -4) pack to y=-3 sign-extended, x and z as 16-bit words."""
    assert stellar_grid_key(-33.0, -65.0, -97.0) == 0xFFFFFFFDFFFEFFFC


_coordinates = st.floats(min_value=-262_144.0, max_value=262_144.0, allow_nan=False)


@pytest.mark.os_agnostic
@given(x=_coordinates, y=_coordinates, z=_coordinates)
def test_key_fields_decode_back_to_cells(x: float, y: float, z: float) -> None:
    """Every key fits 64 bits and its fields recover the per-axis cells."""
    key = stellar_grid_key(x, y, z)

    def _signed16(word: int) -> int:
        return word - 0x10000 if word & 0x8000 else word

    assert 0 <= key <= ALL_ONES
    assert _signed16((key >> 32) & 0xFFFF) == stellar_grid_key_component(y)
    assert _signed16((key >> 16) & 0xFFFF) == stellar_grid_key_component(x)
    assert _signed16(key & 0xFFFF) == stellar_grid_key_component(z)
