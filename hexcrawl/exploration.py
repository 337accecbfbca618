"""Player sight and exploration flags."""

import logging
from collections.abc import Iterable

from hexcrawl.hex_coords import hex_to_key, hexes_in_range, is_in_bounds
from hexcrawl.schemas import HexCell, HexCoord, MapData, RevealMode


logger = logging.getLogger(__name__)


def visible_hexes(hex_map: MapData) -> list[HexCoord]:
    """On-grid hexes within sight distance of any player, first seen first."""
    seen: set[str] = set()
    result: list[HexCoord] = []
    for position in hex_map.player_positions:
        for coord in hexes_in_range(position, hex_map.sight_distance):
            key = hex_to_key(coord)
            if key in seen or not is_in_bounds(coord, hex_map.dimensions):
                continue
            seen.add(key)
            result.append(coord)
    return result


def _with_flags(cell: HexCell | None, coord: HexCoord, **flags: bool) -> HexCell:
    if cell is None:
        return HexCell(coordinate=coord, **flags)
    return cell.model_copy(update=flags)


def reveal(hex_map: MapData) -> MapData:
    """Mark everything the players can see as explored and visible.

    In line-of-sight mode, hexes that dropped out of sight lose is_visible.
    In permanent mode visibility is never withdrawn.
    """
    new_cells = dict(hex_map.cells)
    in_sight = visible_hexes(hex_map)
    in_sight_keys = set()

    for coord in in_sight:
        key = hex_to_key(coord)
        in_sight_keys.add(key)
        new_cells[key] = _with_flags(new_cells.get(key), coord, is_explored=True, is_visible=True)

    if hex_map.reveal_mode == RevealMode.LINE_OF_SIGHT:
        for key, cell in hex_map.cells.items():
            if cell.is_visible and key not in in_sight_keys:
                new_cells[key] = cell.model_copy(update={"is_visible": False})

    logger.debug("Revealed %d hexes around %d players", len(in_sight), len(hex_map.player_positions))
    return hex_map.model_copy(update={"cells": new_cells})


def explore_hexes(hex_map: MapData, coords: Iterable[HexCoord]) -> MapData:
    new_cells = dict(hex_map.cells)
    for coord in coords:
        key = hex_to_key(coord)
        new_cells[key] = _with_flags(new_cells.get(key), coord, is_explored=True)
    return hex_map.model_copy(update={"cells": new_cells})


def unexplore_hex(hex_map: MapData, coord: HexCoord) -> MapData:
    key = hex_to_key(coord)
    cell = hex_map.cells.get(key)
    if cell is None:
        return hex_map
    new_cells = dict(hex_map.cells)
    new_cells[key] = cell.model_copy(update={"is_explored": False})
    return hex_map.model_copy(update={"cells": new_cells})


def reset_exploration(hex_map: MapData) -> MapData:
    """Clear both flags on every cell."""
    new_cells = {
        key: cell.model_copy(update={"is_explored": False, "is_visible": False})
        for key, cell in hex_map.cells.items()
    }
    return hex_map.model_copy(update={"cells": new_cells})
