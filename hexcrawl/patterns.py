"""Pattern capture and paste with rotation and mirroring."""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Optional

from hexcrawl.hex_coords import hex_to_key, is_in_bounds, key_to_hex
from hexcrawl.hex_map import merge_contents
from hexcrawl.schemas import CellContent, Dimensions, HexCoord, MapData, Pattern


logger = logging.getLogger(__name__)


class MirrorMode(str, Enum):
    """Axis negation applied before rotation."""
    HORIZONTAL = "horizontal"  # negate q
    VERTICAL = "vertical"      # negate r
    BOTH = "both"


def rectangular_selection(start: HexCoord, end: HexCoord) -> list[HexCoord]:
    """Every hex in the axial box spanned by two corners, q outer."""
    min_q, max_q = sorted((start.q, end.q))
    min_r, max_r = sorted((start.r, end.r))
    return [
        HexCoord(q=q, r=r)
        for q in range(min_q, max_q + 1)
        for r in range(min_r, max_r + 1)
    ]


def capture_pattern(
    hexes: Iterable[HexCoord],
    hex_map: MapData,
    origin: HexCoord,
) -> Pattern:
    """Copy the authored content of `hexes` relative to `origin`.

    Cells with no descriptive content are left out, but every selected hex
    counts toward the width/height span.
    """
    cells: dict[str, CellContent] = {}
    min_q = min_r = max_q = max_r = None

    for coord in hexes:
        relative = coord - origin
        min_q = relative.q if min_q is None else min(min_q, relative.q)
        max_q = relative.q if max_q is None else max(max_q, relative.q)
        min_r = relative.r if min_r is None else min(min_r, relative.r)
        max_r = relative.r if max_r is None else max(max_r, relative.r)

        cell = hex_map.cells.get(hex_to_key(coord))
        if cell is not None and cell.has_content():
            cells[hex_to_key(relative)] = cell.content()

    if min_q is None:
        return Pattern()

    return Pattern(
        cells=cells,
        width=max_q - min_q + 1,
        height=max_r - min_r + 1,
    )


def mirror_offset(offset: HexCoord, mirror: Optional[MirrorMode | str]) -> HexCoord:
    if mirror is None:
        return offset
    mode = MirrorMode(mirror)
    q, r = offset.q, offset.r
    if mode in (MirrorMode.HORIZONTAL, MirrorMode.BOTH):
        q = -q
    if mode in (MirrorMode.VERTICAL, MirrorMode.BOTH):
        r = -r
    return HexCoord(q=q, r=r)


def rotation_steps(degrees: float) -> int:
    """Number of 60 degree turns, 0-5."""
    return int(degrees // 60) % 6


def rotate_offset(offset: HexCoord, steps: int) -> HexCoord:
    """Rotate about the origin by `steps` x 60 degrees: (q, r) -> (-r, q + r)."""
    q, r = offset.q, offset.r
    for _ in range(steps % 6):
        q, r = -r, q + r
    return HexCoord(q=q, r=r)


def transform_offset(
    offset: HexCoord,
    target: HexCoord,
    rotation: float = 0,
    mirror: Optional[MirrorMode | str] = None,
) -> HexCoord:
    """Mirror, then rotate, then translate onto `target`."""
    moved = rotate_offset(mirror_offset(offset, mirror), rotation_steps(rotation))
    return moved + target


def place_pattern(
    target: HexCoord,
    pattern: Pattern,
    dimensions: Dimensions,
    rotation: float = 0,
    mirror: Optional[MirrorMode | str] = None,
) -> list[tuple[HexCoord, CellContent]]:
    """Absolute placements of every pattern cell that lands on the grid.

    Off-grid cells are dropped silently; partial placement is normal.
    """
    placements = []
    for relative_key, content in pattern.cells.items():
        absolute = transform_offset(key_to_hex(relative_key), target, rotation, mirror)
        if is_in_bounds(absolute, dimensions):
            placements.append((absolute, content))

    dropped = len(pattern.cells) - len(placements)
    if dropped:
        logger.debug("Pattern at %s,%s: %d cells off grid", target.q, target.r, dropped)
    return placements


def paste_preview(
    target: HexCoord,
    pattern: Pattern,
    dimensions: Dimensions,
    rotation: float = 0,
    mirror: Optional[MirrorMode | str] = None,
) -> list[HexCoord]:
    """Hexes a paste would write to."""
    return [coord for coord, _ in place_pattern(target, pattern, dimensions, rotation, mirror)]


def paste_pattern(
    hex_map: MapData,
    target: HexCoord,
    pattern: Pattern,
    rotation: float = 0,
    mirror: Optional[MirrorMode | str] = None,
) -> MapData:
    """Merge a pattern onto the map at `target`.

    Fields the pattern leaves empty keep their current values; exploration
    flags are never touched.
    """
    placements = place_pattern(target, pattern, hex_map.dimensions, rotation, mirror)
    return merge_contents(hex_map, placements)
