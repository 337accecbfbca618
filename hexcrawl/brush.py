"""Brush footprints for painting several hexes at once."""

from enum import Enum

from hexcrawl.hex_coords import distance
from hexcrawl.schemas import HexCoord


class BrushShape(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"


BRUSH_SIZES = [1, 3, 5, 7]
BRUSH_SHAPES = [BrushShape.CIRCLE, BrushShape.SQUARE, BrushShape.DIAMOND]


def _in_shape(coord: HexCoord, center: HexCoord, radius: int, shape: str) -> bool:
    dq = abs(coord.q - center.q)
    dr = abs(coord.r - center.r)
    if shape == BrushShape.SQUARE:
        return dq <= radius and dr <= radius
    if shape == BrushShape.DIAMOND:
        return dq + dr <= radius
    # circle, and anything unrecognised
    return distance(coord, center) <= radius


def brush_hexes(center: HexCoord, size: int, shape: BrushShape | str = BrushShape.CIRCLE) -> list[HexCoord]:
    """Hexes covered by a brush of `size` centred on `center`.

    Scans the axial square of half-width size // 2 (dq outer, dr inner)
    and keeps hexes inside the shape.
    """
    if size <= 1:
        return [center]

    radius = size // 2
    hexes = []
    for dq in range(-radius, radius + 1):
        for dr in range(-radius, radius + 1):
            coord = HexCoord(q=center.q + dq, r=center.r + dr)
            if _in_shape(coord, center, radius, shape):
                hexes.append(coord)
    return hexes


def brush_size_label(size: int) -> str:
    return f"{size}×{size}"
