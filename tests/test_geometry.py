"""
Tests for rotated bounding box math.

Covers:
- Orthogonal rotations return exact (or swapped) sizes
- Arbitrary angles follow the |sin|/|cos| expansion
- Degenerate inputs (negative, non-finite) are sanitized
- Recentering keeps the visual centre fixed
- Content bounds and slider snapping
"""
import math
import pytest

from models.layer import Layer
from models.transform import Rect
from utils.geometry import (compute_bounding_box, layer_bounding_box,
                            recenter_for_transform_change, content_bounds,
                            snap_slider_rotation, normalize_rotation)


def expected_box(w, h, degrees, scale=1.0):
    rad = math.radians(degrees)
    sw, sh = w * scale, h * scale
    return (sh * abs(math.sin(rad)) + sw * abs(math.cos(rad)),
            sh * abs(math.cos(rad)) + sw * abs(math.sin(rad)))


class TestOrthogonalRotations:

    @pytest.mark.parametrize("rotation", [0, 180, 360, -180, 720, 0.04, 179.96])
    def test_keeps_size(self, rotation):
        box = compute_bounding_box(100, 50, rotation)
        assert (box.width, box.height) == (100, 50)

    @pytest.mark.parametrize("rotation", [90, 270, -90, 450, 90.03])
    def test_swaps_size(self, rotation):
        box = compute_bounding_box(100, 50, rotation)
        assert (box.width, box.height) == (50, 100)

    def test_scale_applies_to_both_axes(self):
        box = compute_bounding_box(100, 50, 90, scale=2)
        assert (box.width, box.height) == (100, 200)


class TestArbitraryRotations:

    @pytest.mark.parametrize("rotation", [37, 45, -30, 123.4, 0.06])
    def test_matches_expansion(self, rotation):
        box = compute_bounding_box(100, 50, rotation)
        width, height = expected_box(100, 50, rotation)
        assert box.width == pytest.approx(width, abs=1e-6)
        assert box.height == pytest.approx(height, abs=1e-6)

    def test_scaled_rotation(self):
        box = compute_bounding_box(100, 50, 30, scale=0.5)
        width, height = expected_box(100, 50, 30, 0.5)
        assert box.width == pytest.approx(width)
        assert box.height == pytest.approx(height)

    def test_square_at_45_degrees(self):
        box = compute_bounding_box(10, 10, 45)
        assert box.width == pytest.approx(10 * math.sqrt(2))
        assert box.height == pytest.approx(10 * math.sqrt(2))


class TestDegenerateInputs:

    def test_zero_size(self):
        box = compute_bounding_box(0, 0, 33)
        assert (box.width, box.height) == (0, 0)

    def test_negative_dimension_counts_as_zero(self):
        box = compute_bounding_box(-10, 20, 0)
        assert (box.width, box.height) == (0, 20)

    @pytest.mark.parametrize("scale", [0, -1, float('nan'), float('inf')])
    def test_bad_scale_counts_as_one(self, scale):
        box = compute_bounding_box(100, 50, 0, scale=scale)
        assert (box.width, box.height) == (100, 50)

    def test_non_finite_rotation_counts_as_zero(self):
        box = compute_bounding_box(100, 50, float('nan'))
        assert (box.width, box.height) == (100, 50)

    def test_results_are_finite(self):
        box = compute_bounding_box(float('inf'), 50, 10)
        assert math.isfinite(box.width) and math.isfinite(box.height)

    def test_normalize_rotation(self):
        assert normalize_rotation(-90) == 270
        assert normalize_rotation(725) == 5


class TestRecenter:

    def test_quarter_turn_keeps_centre(self):
        layer = Layer(name="a.png", width=100, height=50, x=10, y=10)
        pos = recenter_for_transform_change(layer, {'rotation': 90})
        assert (pos.x, pos.y) == (35, -15)

        moved = layer.with_changes(rotation=90, x=pos.x, y=pos.y)
        box = layer_bounding_box(moved)
        assert (box.width, box.height) == (50, 100)
        assert box.center.x == pytest.approx(60)
        assert box.center.y == pytest.approx(35)

    def test_scale_change_keeps_centre(self):
        layer = Layer(name="a.png", width=100, height=50, x=0, y=0)
        pos = recenter_for_transform_change(layer, {'scale': 2})
        assert (pos.x, pos.y) == (-50, -25)

    def test_unrelated_change_keeps_position(self):
        layer = Layer(name="a.png", width=100, height=50, x=7, y=9, rotation=33)
        pos = recenter_for_transform_change(layer, {'opacity': 0.5})
        assert pos.x == pytest.approx(7)
        assert pos.y == pytest.approx(9)


class TestContentBounds:

    def test_empty(self):
        assert content_bounds([]) is None

    def test_union(self):
        layers = [
            Layer(name="a", width=10, height=10, x=0, y=0),
            Layer(name="b", width=10, height=20, x=30, y=-5),
        ]
        assert content_bounds(layers) == Rect(0, -5, 40, 20)


class TestSliderSnap:

    @pytest.mark.parametrize("value,expected", [
        (3, 0), (-4, 0), (87, 90), (-93, -90), (176, 180), (-175, -180), (45, 45), (6, 6),
    ])
    def test_snap(self, value, expected):
        assert snap_slider_rotation(value) == expected
