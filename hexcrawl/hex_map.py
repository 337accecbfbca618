"""Sparse hex map operations.

Every function takes a MapData and returns a new one; the input map and its
cell dict are left untouched. Cells are created on first write and never
deleted. Exploration flags survive every content write.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from hexcrawl import config
from hexcrawl.hex_coords import hex_to_key
from hexcrawl.schemas import (
    CellContent,
    Dimensions,
    HexCell,
    HexCoord,
    MapData,
    RevealMode,
)


logger = logging.getLogger(__name__)


def create_map(name: str, width: int, height: int) -> MapData:
    """Fresh map with default settings and no cells."""
    return MapData(
        name=name,
        dimensions=Dimensions(width=width, height=height),
        sight_distance=config.DEFAULT_SIGHT_DISTANCE,
    )


def get_cell(hex_map: MapData, coord: HexCoord) -> Optional[HexCell]:
    return hex_map.cells.get(hex_to_key(coord))


def merge_cell_content(
    existing: Optional[HexCell],
    coord: HexCoord,
    content: Optional[CellContent] = None,
    clear: bool = False,
) -> HexCell:
    """Build the cell that results from writing `content` at `coord`.

    Specified fields replace existing ones, unspecified fields are kept.
    With clear=True every descriptive field is dropped and `content` is
    ignored. is_explored / is_visible always carry over from `existing`.
    """
    is_explored = existing.is_explored if existing else False
    is_visible = existing.is_visible if existing else False

    if clear:
        return HexCell(coordinate=coord, is_explored=is_explored, is_visible=is_visible)

    content = content or CellContent()
    fields = {}
    for field_name in CellContent.model_fields:
        new_value = getattr(content, field_name)
        if new_value is not None:
            fields[field_name] = new_value
        elif existing is not None:
            fields[field_name] = getattr(existing, field_name)

    return HexCell(
        coordinate=coord,
        is_explored=is_explored,
        is_visible=is_visible,
        **fields,
    )


def write_cells(hex_map: MapData, cells: Iterable[HexCell]) -> MapData:
    """Copy of the map with the given cells stored under their keys."""
    new_cells = dict(hex_map.cells)
    for cell in cells:
        new_cells[hex_to_key(cell.coordinate)] = cell
    return hex_map.model_copy(update={"cells": new_cells})


def merge_contents(
    hex_map: MapData,
    placements: Iterable[tuple[HexCoord, CellContent]],
    clear: bool = False,
) -> MapData:
    """Merge many (coord, content) writes in order.

    A coordinate written twice sees the result of the first write.
    """
    new_cells = dict(hex_map.cells)
    for coord, content in placements:
        key = hex_to_key(coord)
        new_cells[key] = merge_cell_content(new_cells.get(key), coord, content, clear=clear)
    return hex_map.model_copy(update={"cells": new_cells})


def update_cell(hex_map: MapData, cell: HexCell) -> MapData:
    """Replace a cell wholesale, flags included."""
    return write_cells(hex_map, [cell])


def place_content(
    hex_map: MapData,
    coord: HexCoord,
    terrain: Optional[str] = None,
    landmark: Optional[str] = None,
    road: Optional[str] = None,
    road_connections: Optional[list[str]] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    gm_notes: Optional[str] = None,
) -> MapData:
    """Drop an icon (and optionally text) onto a hex."""
    content = CellContent(
        terrain=terrain,
        landmark=landmark,
        road=road,
        road_connections=road_connections,
        name=name,
        description=description,
        gm_notes=gm_notes,
    )
    return merge_contents(hex_map, [(coord, content)])


def remove_content(hex_map: MapData, coord: HexCoord) -> MapData:
    """Blank the descriptive fields of a hex but keep the entry.

    Road and flags stay. Absent cells are left absent.
    """
    existing = get_cell(hex_map, coord)
    if existing is None:
        return hex_map

    blanked = existing.model_copy(
        update={
            "terrain": None,
            "landmark": None,
            "name": None,
            "description": None,
            "gm_notes": None,
        }
    )
    return write_cells(hex_map, [blanked])


def place_road(
    hex_map: MapData,
    coord: HexCoord,
    road_type: str,
    connections: Iterable[str] = (),
) -> MapData:
    """Set the road on a hex, replacing its connection list."""
    existing = get_cell(hex_map, coord)
    content = CellContent(road=road_type, road_connections=list(connections))
    return write_cells(hex_map, [merge_cell_content(existing, coord, content)])


def remove_road(hex_map: MapData, coord: HexCoord) -> MapData:
    existing = get_cell(hex_map, coord)
    if existing is None:
        return hex_map
    updated = existing.model_copy(update={"road": None, "road_connections": None})
    return write_cells(hex_map, [updated])


def update_road_connections(
    hex_map: MapData,
    coord: HexCoord,
    connections: Iterable[str],
) -> MapData:
    """Change connections of an existing road. No road, no change."""
    existing = get_cell(hex_map, coord)
    if existing is None or not existing.road:
        return hex_map
    updated = existing.model_copy(update={"road_connections": list(connections)})
    return write_cells(hex_map, [updated])


def set_player_positions(hex_map: MapData, positions: Iterable[HexCoord]) -> MapData:
    return hex_map.model_copy(update={"player_positions": list(positions)})


def add_player_position(hex_map: MapData, coord: HexCoord) -> MapData:
    return hex_map.model_copy(update={"player_positions": [*hex_map.player_positions, coord]})


def remove_player_position(hex_map: MapData, index: int) -> MapData:
    if not 0 <= index < len(hex_map.player_positions):
        return hex_map
    positions = list(hex_map.player_positions)
    del positions[index]
    return hex_map.model_copy(update={"player_positions": positions})


def set_sight_distance(hex_map: MapData, distance: int) -> MapData:
    """Clamp to the allowed sight range."""
    clamped = max(config.MIN_SIGHT_DISTANCE, min(config.MAX_SIGHT_DISTANCE, int(distance)))
    return hex_map.model_copy(update={"sight_distance": clamped})


def set_reveal_mode(hex_map: MapData, mode: RevealMode | str) -> MapData:
    return hex_map.model_copy(update={"reveal_mode": RevealMode(mode)})
