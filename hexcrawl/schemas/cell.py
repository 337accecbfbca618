"""Hex cell schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import HexCoord, parse_key


# Fields that count as authored content. Road connections alone do not.
CONTENT_FIELDS = ("terrain", "landmark", "road", "name", "description", "gm_notes")


class CellContent(BaseModel):
    """Authored content of a cell without position or exploration state.

    Used as the pattern record and as the payload of merge operations.
    A field left as None means "not specified".
    """

    terrain: Optional[str] = None
    landmark: Optional[str] = None
    road: Optional[str] = None
    road_connections: Optional[list[str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    gm_notes: Optional[str] = None

    def has_content(self) -> bool:
        """True when any descriptive field is non-empty."""
        return any(getattr(self, f) for f in CONTENT_FIELDS)


class HexCell(BaseModel):
    """A single authored hex on the map."""

    coordinate: HexCoord
    terrain: Optional[str] = None
    landmark: Optional[str] = None
    road: Optional[str] = None
    road_connections: Optional[list[str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    gm_notes: Optional[str] = None
    is_explored: bool = False
    is_visible: bool = False

    def content(self) -> CellContent:
        """Strip coordinate and exploration flags."""
        return CellContent.model_validate(
            self.model_dump(exclude={"coordinate", "is_explored", "is_visible"})
        )

    def has_content(self) -> bool:
        return any(getattr(self, f) for f in CONTENT_FIELDS)


class GeneratedCell(BaseModel):
    """Output of the biome generator, not yet merged into a map."""

    coordinate: HexCoord
    terrain: Optional[str] = None
    landmark: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    gm_notes: Optional[str] = None

    def content(self) -> CellContent:
        return CellContent.model_validate(self.model_dump(exclude={"coordinate"}))


class Pattern(BaseModel):
    """Origin-relative capture of authored cells."""

    cells: dict[str, CellContent] = Field(default_factory=dict)  # "dq,dr" -> content
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    @field_validator("cells")
    @classmethod
    def validate_offset_keys(cls, v: dict[str, CellContent]) -> dict[str, CellContent]:
        for key in v:
            parse_key(key)
        return v

    @property
    def size(self) -> int:
        return len(self.cells)
