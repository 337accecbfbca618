"""Tests for brush footprints."""
import pytest

from hexcrawl.brush import BRUSH_SIZES, BrushShape, brush_hexes, brush_size_label
from hexcrawl.hex_coords import distance
from hexcrawl.schemas import HexCoord


CENTER = HexCoord(q=4, r=4)


class TestBrushHexes:
    def test_size_one_is_center(self):
        for shape in BrushShape:
            assert brush_hexes(CENTER, 1, shape) == [CENTER]

    @pytest.mark.parametrize(
        "size,shape,count",
        [
            (3, BrushShape.CIRCLE, 7),
            (3, BrushShape.SQUARE, 9),
            (3, BrushShape.DIAMOND, 5),
            (5, BrushShape.CIRCLE, 19),
            (5, BrushShape.SQUARE, 25),
            (5, BrushShape.DIAMOND, 13),
        ],
    )
    def test_counts(self, size, shape, count):
        assert len(brush_hexes(CENTER, size, shape)) == count

    def test_circle_is_hex_radius(self):
        hexes = brush_hexes(CENTER, 7)
        assert all(distance(h, CENTER) <= 3 for h in hexes)
        assert len(hexes) == 37

    def test_scan_order(self):
        hexes = brush_hexes(HexCoord(q=0, r=0), 3, BrushShape.SQUARE)
        assert hexes[0] == HexCoord(q=-1, r=-1)
        assert hexes[1] == HexCoord(q=-1, r=0)
        assert hexes[-1] == HexCoord(q=1, r=1)

    def test_unknown_shape_acts_as_circle(self):
        assert brush_hexes(CENTER, 5, "blob") == brush_hexes(CENTER, 5, BrushShape.CIRCLE)

    def test_shape_by_string(self):
        assert brush_hexes(CENTER, 3, "diamond") == brush_hexes(CENTER, 3, BrushShape.DIAMOND)


def test_size_labels():
    assert [brush_size_label(s) for s in BRUSH_SIZES] == ["1×1", "3×3", "5×5", "7×7"]
