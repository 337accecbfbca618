"""Pydantic schemas for hexcrawl."""

from .base import (
    Terrain,
    Landmark,
    RoadType,
    RoadDirection,
    RevealMode,
    HexCoord,
    PixelCoord,
    Dimensions,
)
from .cell import CONTENT_FIELDS, CellContent, HexCell, GeneratedCell, Pattern
from .map import GridAppearance, MapData
from .biome import BiomeType, BiomeConfig

__all__ = [
    # base
    "Terrain",
    "Landmark",
    "RoadType",
    "RoadDirection",
    "RevealMode",
    "HexCoord",
    "PixelCoord",
    "Dimensions",
    # cell
    "CONTENT_FIELDS",
    "CellContent",
    "HexCell",
    "GeneratedCell",
    "Pattern",
    # map
    "GridAppearance",
    "MapData",
    # biome
    "BiomeType",
    "BiomeConfig",
]
