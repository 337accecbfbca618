"""Configuration for the hexcrawl engine."""

import os
from pathlib import Path

# Paths
HEXCRAWL_ROOT = Path(__file__).parent
DATA_DIR = HEXCRAWL_ROOT / "data"
BIOMES_PATH = DATA_DIR / "biomes.toml"

# Logging
LOG_LEVEL = os.environ.get("HEXCRAWL_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Geometry
DEFAULT_HEX_SIZE = 30.0

# Flood fill
FLOOD_FILL_MAX_HEXES = 1000
FLOOD_FILL_PREVIEW_MAX_HEXES = 100
LARGE_OPERATION_THRESHOLD = 20  # previews above this ask for confirmation

# History
DEFAULT_MAX_HISTORY_SIZE = 50
MIN_HISTORY_SIZE = 1
MAX_HISTORY_SIZE = 100

# Sight
DEFAULT_SIGHT_DISTANCE = 2
MIN_SIGHT_DISTANCE = 1
MAX_SIGHT_DISTANCE = 10

# Biome generation fallbacks when no weight crosses the threshold
FALLBACK_TERRAIN = "plains"
FALLBACK_LANDMARK = "marker"
