"""Tests for hex coordinate utilities."""
import math

import pytest

from hexcrawl.hex_coords import (
    HEX_DIRECTIONS,
    axial_to_offset,
    distance,
    get_neighbor,
    get_opposite_direction,
    grid_coordinates,
    hex_equals,
    hex_neighbors,
    hex_round,
    hex_to_key,
    hex_to_pixel,
    hexes_in_range,
    is_in_bounds,
    key_to_hex,
    offset_to_axial,
    pixel_to_hex,
)
from hexcrawl.schemas import Dimensions, HexCoord, PixelCoord


def h(q, r):
    return HexCoord(q=q, r=r)


class TestHexDirections:
    def test_six_directions(self):
        assert len(HEX_DIRECTIONS) == 6

    def test_direction_names(self):
        expected = {"E", "NE", "NW", "W", "SW", "SE"}
        assert set(HEX_DIRECTIONS.keys()) == expected


class TestNeighbors:
    def test_all_neighbors_from_origin(self):
        expected = [h(1, 0), h(1, -1), h(0, -1), h(-1, 0), h(-1, 1), h(0, 1)]
        assert hex_neighbors(h(0, 0)) == expected

    def test_neighbors_always_six_at_distance_one(self):
        for center in [h(0, 0), h(3, -7), h(-12, 4)]:
            neighbors = hex_neighbors(center)
            assert len(neighbors) == 6
            assert all(distance(center, n) == 1 for n in neighbors)

    def test_get_neighbor_matches_list(self):
        center = h(2, 5)
        assert [get_neighbor(center, d) for d in range(6)] == hex_neighbors(center)

    def test_get_neighbor_wraps_direction(self):
        assert get_neighbor(h(0, 0), 6) == h(1, 0)

    def test_opposites(self):
        assert get_opposite_direction(0) == 3  # E -> W
        for direction in range(6):
            opposite = get_opposite_direction(direction)
            assert get_opposite_direction(opposite) == direction


class TestDistance:
    def test_same_hex_distance_zero(self):
        assert distance(h(4, -2), h(4, -2)) == 0

    def test_adjacent_hex_distance_one(self):
        assert distance(h(0, 0), h(1, 0)) == 1
        assert distance(h(0, 0), h(0, 1)) == 1

    def test_diagonal_distance(self):
        assert distance(h(0, 0), h(2, -1)) == 2
        assert distance(h(0, 0), h(3, 3)) == 6

    def test_symmetric(self):
        pairs = [(h(0, 0), h(5, -2)), (h(-3, 4), h(2, 2)), (h(7, 7), h(-1, -9))]
        for a, b in pairs:
            assert distance(a, b) == distance(b, a)


class TestHexesInRange:
    @pytest.mark.parametrize("radius,expected", [(0, 1), (1, 7), (2, 19), (3, 37), (5, 91)])
    def test_count(self, radius, expected):
        assert len(hexes_in_range(h(0, 0), radius)) == expected
        assert expected == 1 + 3 * radius * (radius + 1)

    def test_all_within_radius_and_unique(self):
        center = h(4, -3)
        hexes = hexes_in_range(center, 3)
        assert all(distance(center, x) <= 3 for x in hexes)
        assert len(set(hexes)) == len(hexes)

    def test_radius_zero_is_center(self):
        assert hexes_in_range(h(2, 2), 0) == [h(2, 2)]

    def test_negative_radius_is_empty(self):
        assert hexes_in_range(h(0, 0), -1) == []


class TestPixelConversion:
    def test_origin(self):
        pixel = hex_to_pixel(h(0, 0), 10)
        assert pixel.x == 0
        assert pixel.y == 0

    def test_flat_top_layout(self):
        right = hex_to_pixel(h(1, 0), 10)
        assert right.x == pytest.approx(10 * math.sqrt(3))
        assert right.y == pytest.approx(0)

        below = hex_to_pixel(h(0, 1), 10)
        assert below.x == pytest.approx(10 * math.sqrt(3) / 2)
        assert below.y == pytest.approx(15)

    @pytest.mark.parametrize("size", [1, 10, 30, 47.5])
    def test_round_trip(self, size):
        for q in range(-6, 7):
            for r in range(-6, 7):
                assert pixel_to_hex(hex_to_pixel(h(q, r), size), size) == h(q, r)

    def test_pixel_near_center_snaps(self):
        center = hex_to_pixel(h(3, 2), 30)
        nudged = PixelCoord(x=center.x + 4, y=center.y - 3)
        assert pixel_to_hex(nudged, 30) == h(3, 2)


class TestHexRound:
    def test_integer_input_unchanged(self):
        assert hex_round(2.0, -5.0) == h(2, -5)

    def test_corrects_largest_error(self):
        # q and r tie at 0.4, s has the smallest error so r is recomputed
        assert hex_round(0.4, 0.4) == h(0, 1)

    def test_result_is_valid_cube(self):
        for q, r in [(0.49, 0.49), (-1.3, 2.6), (5.51, -2.2)]:
            rounded = hex_round(q, r)
            assert rounded.q + rounded.r + rounded.s == 0


class TestKeys:
    def test_key_format(self):
        assert hex_to_key(h(3, -2)) == "3,-2"
        assert hex_to_key(h(0, 0)) == "0,0"

    def test_key_round_trip(self):
        for coord in [h(0, 0), h(-1, -1), h(12, -40)]:
            assert key_to_hex(hex_to_key(coord)) == coord

    @pytest.mark.parametrize(
        "bad", ["", "abc", "1,x", "1,2,3", "1.5,2", " 1,2", "1, 2", "+1,2", "1_0,2", "01,2", "-0,1"]
    )
    def test_malformed_key_raises(self, bad):
        with pytest.raises(ValueError):
            key_to_hex(bad)

    def test_hex_equals(self):
        assert hex_equals(h(1, 2), h(1, 2))
        assert not hex_equals(h(1, 2), h(2, 1))


class TestOffsetGrid:
    def test_axial_to_offset(self):
        assert axial_to_offset(h(0, 4)) == (4, 2)
        assert axial_to_offset(h(3, 1)) == (1, 3)

    def test_floor_for_negative_rows(self):
        # floor(-1 / 2) == -1
        assert axial_to_offset(h(0, -1)) == (-1, -1)

    def test_offset_round_trip(self):
        for row in range(-3, 6):
            for col in range(-3, 6):
                assert axial_to_offset(offset_to_axial(row, col)) == (row, col)

    def test_bounds(self):
        dims = Dimensions(width=10, height=5)
        assert is_in_bounds(h(0, 4), dims)
        assert is_in_bounds(h(5, 4), dims)
        assert is_in_bounds(h(-2, 4), dims)
        assert not is_in_bounds(h(8, 4), dims)
        assert not is_in_bounds(h(-3, 4), dims)
        assert not is_in_bounds(h(0, 6), dims)
        assert not is_in_bounds(h(0, -1), dims)

    def test_grid_coordinates(self):
        dims = Dimensions(width=3, height=2)
        coords = grid_coordinates(dims)
        assert coords == [h(0, 0), h(1, 0), h(2, 0), h(0, 1), h(1, 1), h(2, 1)]
        assert all(is_in_bounds(c, dims) for c in coords)

    def test_grid_coordinates_shift_on_later_rows(self):
        coords = grid_coordinates(Dimensions(width=2, height=4))
        assert coords[-2:] == [h(-1, 3), h(0, 3)]
        assert len(coords) == 8
