"""Map-level schemas."""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import Dimensions, HexCoord, RevealMode, parse_key
from .cell import HexCell


def default_terrain_colors() -> dict[str, str]:
    return {
        "mountains": "#8B4513",
        "plains": "#90EE90",
        "swamps": "#556B2F",
        "water": "#4169E1",
        "desert": "#F4A460",
        "hills": "#65A330",
        "shallowWater": "#87CEEB",
        "deepWater": "#2563EB",
        "oceanWater": "#1E3A8A",
    }


def default_road_colors() -> dict[str, str]:
    return {
        "path": "#8B4513",
        "road": "#696969",
        "highway": "#333333",
    }


class GridAppearance(BaseModel):
    """Rendering configuration carried with the map. Not read by the core."""

    hex_size: float = Field(default=30, gt=0)
    border_color: str = "#333333"
    background_color: str = "#f0f0f0"
    unexplored_color: str = "#cccccc"
    sight_color: str = "#e6e6fa"
    text_size: int = 12
    terrain_colors: dict[str, str] = Field(default_factory=default_terrain_colors)
    road_colors: dict[str, str] = Field(default_factory=default_road_colors)
    border_width: int = 1


class MapData(BaseModel):
    """A complete hex crawl map.

    Cells are keyed by "q,r". A missing key means nothing has been authored
    there; a present cell may still be blank.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    dimensions: Dimensions
    cells: dict[str, HexCell] = Field(default_factory=dict)
    player_positions: list[HexCoord] = Field(default_factory=list)
    sight_distance: int = 2
    reveal_mode: RevealMode = RevealMode.PERMANENT
    appearance: GridAppearance = Field(default_factory=GridAppearance)

    @field_validator("cells")
    @classmethod
    def validate_cell_keys(cls, v: dict[str, HexCell]) -> dict[str, HexCell]:
        for key, cell in v.items():
            if parse_key(key) != (cell.coordinate.q, cell.coordinate.r):
                raise ValueError(f"Cell at {key} has coordinate {cell.coordinate.q},{cell.coordinate.r}")
        return v

    def get_cell(self, key: str) -> Optional[HexCell]:
        return self.cells.get(key)
