"""Biome generator configuration."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BiomeType(str, Enum):
    FOREST = "forest"
    MOUNTAIN = "mountain"
    COASTAL = "coastal"
    DESERT = "desert"
    SWAMP = "swamp"
    MIXED = "mixed"


class BiomeConfig(BaseModel):
    """Settings for one generation run.

    biome_type is a plain string so unknown profiles pass through; they
    resolve to an all-zero terrain table.
    """

    biome_type: str = BiomeType.MIXED.value
    density: float = Field(default=0.7, ge=0.0, le=1.0)
    variation: float = Field(default=0.5, ge=0.0, le=1.0)  # stored, not read by generation
    landmark_chance: float = Field(default=0.1, ge=0.0, le=1.0)
    seed: Optional[float] = None
    custom_terrain_weights: dict[str, float] = Field(default_factory=dict)
    custom_landmark_weights: dict[str, float] = Field(default_factory=dict)
