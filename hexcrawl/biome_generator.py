"""Seeded procedural terrain and landmark generation."""

import logging
import random
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from hexcrawl import config
from hexcrawl.hex_coords import is_in_bounds
from hexcrawl.hex_map import merge_contents
from hexcrawl.schemas import (
    BiomeConfig,
    Dimensions,
    GeneratedCell,
    HexCoord,
    MapData,
)


logger = logging.getLogger(__name__)

# Ordered (label, weight) pairs. Order decides weighted draws.
WeightTable = list[tuple[str, float]]

PRNG_MULTIPLIER = 9301
PRNG_INCREMENT = 49297
PRNG_MODULUS = 233280


class SeededRandom:
    """Linear congruential generator with a fixed, portable sequence.

    state = (state * 9301 + 49297) mod 233280, value = state / 233280
    """

    def __init__(self, seed: float):
        self.state = seed

    def next(self) -> float:
        self.state = (self.state * PRNG_MULTIPLIER + PRNG_INCREMENT) % PRNG_MODULUS
        return self.state / PRNG_MODULUS


def override_weights(table: WeightTable, overrides: dict[str, float]) -> WeightTable:
    """Replace individual entries; unknown labels are appended at the end."""
    result = list(table)
    positions = {label: i for i, (label, _) in enumerate(result)}
    for label, weight in overrides.items():
        if label in positions:
            result[positions[label]] = (label, weight)
        else:
            positions[label] = len(result)
            result.append((label, weight))
    return result


def select_weighted(
    weights: WeightTable,
    rng: SeededRandom,
    fallback: str,
) -> Optional[str]:
    """Weighted draw by subtract-and-check over the table in order.

    Always consumes exactly one random value. Zero-weight entries never win.
    Returns `fallback` when rounding leaves the threshold above zero, and
    None when the table has no weight at all.
    """
    total = sum(weight for _, weight in weights)
    threshold = rng.next() * total
    if total <= 0:
        return None

    for label, weight in weights:
        threshold -= weight
        if weight > 0 and threshold <= 0:
            return label

    return fallback


def _pairs(raw: list) -> WeightTable:
    return [(str(label), float(weight)) for label, weight in raw]


class BiomeGenerator:
    """Assigns terrain and landmarks to a set of hexes from a biome profile."""

    def __init__(self, biomes_path: str | Path | None = None):
        if biomes_path is None:
            biomes_path = config.BIOMES_PATH
        with open(biomes_path, "rb") as f:
            self.config = tomllib.load(f)

        self.terrain_labels: list[str] = list(self.config["terrain_labels"]["values"])
        self.default_landmarks: WeightTable = _pairs(self.config["default_landmarks"]["weights"])
        self.biomes: dict[str, dict] = self.config.get("biomes", {})

    def terrain_weights(self, biome_type: str) -> WeightTable:
        """Terrain table for a biome. Unknown biomes get all zeros."""
        table: WeightTable = [(label, 0.0) for label in self.terrain_labels]
        profile = self.biomes.get(biome_type)
        if profile is None:
            logger.warning("Unknown biome type %r, terrain table is empty", biome_type)
            return table
        return override_weights(table, dict(_pairs(profile.get("terrain", []))))

    def landmark_weights(self, biome_type: str) -> WeightTable:
        table = list(self.default_landmarks)
        profile = self.biomes.get(biome_type)
        if profile is None:
            return table
        return override_weights(table, dict(_pairs(profile.get("landmark_overrides", []))))

    def generate(
        self,
        biome_config: BiomeConfig,
        coordinates: Iterable[HexCoord],
    ) -> list[GeneratedCell]:
        """Generate cells for `coordinates` in the order given.

        Per hex: one draw against density; on success a terrain draw, then
        one draw against landmark_chance and, on success, a landmark draw.
        Hexes that miss the density roll are left out of the result.
        biome_config.variation is not consulted.
        """
        seed = biome_config.seed
        if seed is None:
            seed = random.random()
        rng = SeededRandom(seed)

        terrain_weights = override_weights(
            self.terrain_weights(biome_config.biome_type),
            biome_config.custom_terrain_weights,
        )
        landmark_weights = override_weights(
            self.landmark_weights(biome_config.biome_type),
            biome_config.custom_landmark_weights,
        )

        cells: list[GeneratedCell] = []
        for coord in coordinates:
            if rng.next() >= biome_config.density:
                continue

            terrain = select_weighted(terrain_weights, rng, config.FALLBACK_TERRAIN)
            landmark = None
            if rng.next() < biome_config.landmark_chance:
                landmark = select_weighted(landmark_weights, rng, config.FALLBACK_LANDMARK)

            if terrain is None:
                continue
            cells.append(GeneratedCell(coordinate=coord, terrain=terrain, landmark=landmark))

        logger.debug(
            "Generated %d cells for biome %s (seed=%s)",
            len(cells), biome_config.biome_type, seed,
        )
        return cells


# Shipped tables, parsed once at import so generation itself reads no files
DEFAULT_GENERATOR = BiomeGenerator()


def box_coordinates(dimensions: Dimensions) -> list[HexCoord]:
    """Axial box q in [0, width), r in [0, height), q outer."""
    return [
        HexCoord(q=q, r=r)
        for q in range(dimensions.width)
        for r in range(dimensions.height)
    ]


def generate_biome(
    dimensions: Dimensions,
    biome_config: BiomeConfig,
    coordinates: Optional[Iterable[HexCoord]] = None,
    generator: Optional[BiomeGenerator] = None,
) -> list[GeneratedCell]:
    """Generate a biome over `coordinates`, or the axial box of `dimensions`."""
    generator = generator or DEFAULT_GENERATOR
    if coordinates is None:
        coordinates = box_coordinates(dimensions)
    return generator.generate(biome_config, coordinates)


def apply_biome(
    hex_map: MapData,
    cells: Iterable[GeneratedCell],
    target: Optional[HexCoord] = None,
) -> MapData:
    """Merge generated cells onto the map, shifted by `target`.

    Cells that land off the grid are dropped.
    """
    offset = target or HexCoord(q=0, r=0)
    placements = []
    for cell in cells:
        coord = cell.coordinate + offset
        if is_in_bounds(coord, hex_map.dimensions):
            placements.append((coord, cell.content()))
    return merge_contents(hex_map, placements)
