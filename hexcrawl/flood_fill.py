"""Connected-region flood fill over the sparse map."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from hexcrawl import config
from hexcrawl.hex_coords import hex_neighbors, hex_to_key, is_in_bounds
from hexcrawl.hex_map import merge_contents
from hexcrawl.schemas import CellContent, Dimensions, HexCoord, MapData


logger = logging.getLogger(__name__)


@dataclass
class FloodFillPreview:
    """What a fill would touch, for UI confirmation."""
    hexes: list[HexCoord] = field(default_factory=list)
    count: int = 0
    is_large_operation: bool = False


def flood_fill_hexes(
    start: HexCoord,
    hex_map: MapData,
    target_terrain: Optional[str] = None,
    target_landmark: Optional[str] = None,
    max_hexes: int = config.FLOOD_FILL_MAX_HEXES,
    bounds: Optional[Dimensions] = None,
) -> list[HexCoord]:
    """Find the connected region around `start` that matches the target.

    The target defaults to whatever the start cell carries. A hex matches
    when its terrain equals the target terrain (or both are empty) and the
    same holds for the landmark. Non-matching hexes are walls.

    When the target is blank (no terrain, no landmark) only hexes present
    in the map are considered, otherwise the empty plane around the map
    would match forever.

    Args:
        start: Hex to fill from
        hex_map: Map to read; not modified
        target_terrain: Terrain to match, None for the start cell's
        target_landmark: Landmark to match, None for the start cell's
        max_hexes: Stop after this many matches
        bounds: Optional grid; hexes outside it are treated as walls

    Returns:
        Matching hexes in breadth-first discovery order
    """
    cells = hex_map.cells
    start_cell = cells.get(hex_to_key(start))

    match_terrain = target_terrain if target_terrain is not None else (
        start_cell.terrain if start_cell else None
    )
    match_landmark = target_landmark if target_landmark is not None else (
        start_cell.landmark if start_cell else None
    )
    looking_for_empty = not match_terrain and not match_landmark

    result: list[HexCoord] = []
    queue: deque[HexCoord] = deque([start])
    seen: set[str] = {hex_to_key(start)}

    while queue and len(result) < max_hexes:
        current = queue.popleft()
        key = hex_to_key(current)

        if looking_for_empty and key not in cells:
            continue
        if bounds is not None and not is_in_bounds(current, bounds):
            continue

        cell = cells.get(key)
        terrain = cell.terrain if cell else None
        landmark = cell.landmark if cell else None

        terrain_matches = terrain == match_terrain if match_terrain else not terrain
        landmark_matches = landmark == match_landmark if match_landmark else not landmark
        if not (terrain_matches and landmark_matches):
            continue

        result.append(current)

        for neighbor in hex_neighbors(current):
            neighbor_key = hex_to_key(neighbor)
            if neighbor_key in seen:
                continue
            if looking_for_empty and neighbor_key not in cells:
                continue
            seen.add(neighbor_key)
            queue.append(neighbor)

    logger.debug(
        "Flood fill from %s,%s matched %d hexes (terrain=%s, landmark=%s)",
        start.q, start.r, len(result), match_terrain, match_landmark,
    )
    return result


def flood_fill_preview(
    start: HexCoord,
    hex_map: MapData,
    target_terrain: Optional[str] = None,
    target_landmark: Optional[str] = None,
    bounds: Optional[Dimensions] = None,
) -> FloodFillPreview:
    """Capped fill used to show the user what would change."""
    hexes = flood_fill_hexes(
        start,
        hex_map,
        target_terrain,
        target_landmark,
        max_hexes=config.FLOOD_FILL_PREVIEW_MAX_HEXES,
        bounds=bounds,
    )
    count = len(hexes)
    return FloodFillPreview(
        hexes=hexes,
        count=count,
        is_large_operation=count > config.LARGE_OPERATION_THRESHOLD,
    )


def apply_flood_fill(
    hexes: list[HexCoord],
    hex_map: MapData,
    new_terrain: Optional[str] = None,
    new_landmark: Optional[str] = None,
    new_road: Optional[str] = None,
    clear_existing: bool = False,
) -> MapData:
    """Write new content to every hex in `hexes`.

    With clear_existing the descriptive fields are removed instead.
    Exploration flags are carried over either way.
    """
    content = CellContent(terrain=new_terrain, landmark=new_landmark, road=new_road)
    return merge_contents(
        hex_map,
        ((coord, content) for coord in hexes),
        clear=clear_existing,
    )
