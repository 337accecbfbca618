"""Axial hex coordinate utilities.

Flat-top layout. Neighbor numbering (clockwise from "right"):
    0: E   (+1,  0)
    1: NE  (+1, -1)
    2: NW  ( 0, -1)
    3: W   (-1,  0)
    4: SW  (-1, +1)
    5: SE  ( 0, +1)

Bounds checks against the rectangular grid go through axial_to_offset()
and nothing else.
"""

import math
from typing import NamedTuple

from hexcrawl.config import DEFAULT_HEX_SIZE
from hexcrawl.schemas import Dimensions, HexCoord, PixelCoord
from hexcrawl.schemas.base import parse_key


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


# Neighbor offsets indexed by direction (clockwise from E)
HEX_NEIGHBOR_OFFSETS: list[HexOffset] = [
    HexOffset(+1,  0),  # 0: E
    HexOffset(+1, -1),  # 1: NE
    HexOffset( 0, -1),  # 2: NW
    HexOffset(-1,  0),  # 3: W
    HexOffset(-1, +1),  # 4: SW
    HexOffset( 0, +1),  # 5: SE
]

HEX_DIRECTIONS: dict[str, int] = {
    "E": 0,
    "NE": 1,
    "NW": 2,
    "W": 3,
    "SW": 4,
    "SE": 5,
}

SQRT3 = math.sqrt(3)


def hex_to_pixel(coord: HexCoord, size: float = DEFAULT_HEX_SIZE) -> PixelCoord:
    """Centre of a hex in pixel space."""
    x = size * (SQRT3 * coord.q + SQRT3 / 2 * coord.r)
    y = size * (1.5 * coord.r)
    return PixelCoord(x=x, y=y)


def pixel_to_hex(pixel: PixelCoord, size: float = DEFAULT_HEX_SIZE) -> HexCoord:
    """Hex containing a pixel position. Inverse of hex_to_pixel."""
    q = (SQRT3 / 3 * pixel.x - 1 / 3 * pixel.y) / size
    r = (2 / 3 * pixel.y) / size
    return hex_round(q, r)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; hex rounding wants .5 -> up
    return math.floor(value + 0.5)


def hex_round(q: float, r: float) -> HexCoord:
    """Round fractional axial coordinates to the nearest hex.

    Rounds all three cube components, then recomputes the one with the
    largest rounding error so that q + r + s == 0.
    """
    s = -q - r

    rq = _round_half_up(q)
    rr = _round_half_up(r)
    rs = _round_half_up(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return HexCoord(q=rq, r=rr)


def distance(a: HexCoord, b: HexCoord) -> int:
    """Calculate hex distance between two coordinates."""
    return (abs(a.q - b.q) + abs(a.q + a.r - b.q - b.r) + abs(a.r - b.r)) // 2


def get_neighbor(coord: HexCoord, direction: int) -> HexCoord:
    """Get the neighbor in a direction (0-5, wraps)."""
    offset = HEX_NEIGHBOR_OFFSETS[direction % 6]
    return HexCoord(q=coord.q + offset.dq, r=coord.r + offset.dr)


def get_opposite_direction(direction: int) -> int:
    """Direction 0 (E) is opposite 3 (W), etc."""
    return (direction + 3) % 6


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """All 6 neighbors in direction order."""
    return [
        HexCoord(q=coord.q + offset.dq, r=coord.r + offset.dr)
        for offset in HEX_NEIGHBOR_OFFSETS
    ]


def hexes_in_range(center: HexCoord, radius: int) -> list[HexCoord]:
    """All hexes within `radius` steps of center, center included.

    Returns 1 + 3n(n+1) hexes, q ascending then r ascending.
    A negative radius yields nothing.
    """
    results = []
    for dq in range(-radius, radius + 1):
        r1 = max(-radius, -dq - radius)
        r2 = min(radius, -dq + radius)
        for dr in range(r1, r2 + 1):
            results.append(HexCoord(q=center.q + dq, r=center.r + dr))
    return results


def coords_to_key(q: int, r: int) -> str:
    """Convert coordinates to string key for dict lookups."""
    return f"{q},{r}"


def hex_to_key(coord: HexCoord) -> str:
    return coords_to_key(coord.q, coord.r)


def key_to_coords(key: str) -> tuple[int, int]:
    """Convert string key back to coordinates.

    Raises ValueError for anything that is not two comma-separated integers.
    """
    return parse_key(key)


def key_to_hex(key: str) -> HexCoord:
    q, r = key_to_coords(key)
    return HexCoord(q=q, r=r)


def hex_equals(a: HexCoord, b: HexCoord) -> bool:
    return a.q == b.q and a.r == b.r


def axial_to_offset(coord: HexCoord) -> tuple[int, int]:
    """Axial -> (row, col) on the rectangular grid.

    row = r, col = q + floor(row / 2)
    """
    row = coord.r
    col = coord.q + row // 2
    return (row, col)


def offset_to_axial(row: int, col: int) -> HexCoord:
    """(row, col) -> axial. Inverse of axial_to_offset."""
    return HexCoord(q=col - row // 2, r=row)


def is_in_bounds(coord: HexCoord, dimensions: Dimensions) -> bool:
    """Whether a hex falls inside the width x height grid."""
    row, col = axial_to_offset(coord)
    return 0 <= row < dimensions.height and 0 <= col < dimensions.width


def grid_coordinates(dimensions: Dimensions) -> list[HexCoord]:
    """Every on-grid hex, row by row, left to right."""
    return [
        offset_to_axial(row, col)
        for row in range(dimensions.height)
        for col in range(dimensions.width)
    ]
