"""Base types and enums for hexcrawl schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Terrain(str, Enum):
    """Terrain tags the editor ships with.

    Cell fields accept any string; these are the known values.
    """
    MOUNTAINS = "mountains"
    PLAINS = "plains"
    SWAMPS = "swamps"
    WATER = "water"
    DESERT = "desert"
    HILLS = "hills"
    SHALLOW_WATER = "shallowWater"
    DEEP_WATER = "deepWater"
    OCEAN_WATER = "oceanWater"


class Landmark(str, Enum):
    # Settlements
    VILLAGE = "village"
    HAMLET = "hamlet"
    TOWN = "town"
    CITY = "city"
    # Ruins and strongholds
    RUINS_ANCIENT = "ruinsAncient"
    RUINS_RECENT = "ruinsRecent"
    CASTLE = "castle"
    FORTRESS = "fortress"
    WATCHTOWER = "watchtower"
    TOWER = "tower"
    SIGNAL_FIRE = "signalFire"
    # Underground
    MINE_ENTRANCE = "mineEntrance"
    CAVE_MOUTH = "caveMouth"
    # Sacred
    STANDING_STONES = "standingStones"
    STONE_CIRCLE = "stoneCircle"
    TEMPLE = "temple"
    SHRINE = "shrine"
    WIZARD_TOWER = "wizardTower"
    # Travel
    TRADING_POST = "tradingPost"
    ROADHOUSE = "roadhouse"
    BRIDGE = "bridge"
    FORD = "ford"
    FERRY_CROSSING = "ferryCrossing"
    CAMPSITE = "campsite"
    HUNTERS_LODGE = "huntersLodge"
    MARKER = "marker"


class RoadType(str, Enum):
    PATH = "path"
    ROAD = "road"
    HIGHWAY = "highway"


class RoadDirection(str, Enum):
    """Edges a road can leave a hex through."""
    NORTH = "north"
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    NORTHWEST = "northwest"


class RevealMode(str, Enum):
    PERMANENT = "permanent"
    LINE_OF_SIGHT = "lineOfSight"


class HexCoord(BaseModel):
    """Axial hex coordinates."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int

    @property
    def s(self) -> int:
        """Derived cube coordinate."""
        return -self.q - self.r

    def __add__(self, other: "HexCoord") -> "HexCoord":
        return HexCoord(q=self.q + other.q, r=self.r + other.r)

    def __sub__(self, other: "HexCoord") -> "HexCoord":
        return HexCoord(q=self.q - other.q, r=self.r - other.r)


class PixelCoord(BaseModel):
    """Screen-space position."""

    x: float
    y: float


class Dimensions(BaseModel):
    """Width x height of the rectangular offset grid."""

    width: int = Field(ge=0)
    height: int = Field(ge=0)


def parse_key(key: str) -> tuple[int, int]:
    """Split a "q,r" key into integers, ValueError if malformed.

    Only the canonical form is accepted: no padding, signs other than a
    leading minus, leading zeros or digit separators.
    """
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Malformed hex key {key!r}")
    q, r = int(parts[0]), int(parts[1])
    if f"{q},{r}" != key:
        raise ValueError(f"Non-canonical hex key {key!r}, expected '{q},{r}'")
    return (q, r)
