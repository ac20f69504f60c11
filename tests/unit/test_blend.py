"""Tests for gradient blending."""

import pytest
from rich.color_triplet import ColorTriplet

from huekit.core.blend import blend_fraction, blend_hex, blend_rgb


class TestBlendFraction:
    """Tests for blend_fraction()."""

    def test_zero_steps(self):
        """No steps stays on the start color instead of dividing by zero."""
        assert blend_fraction(0, 0) == 0.0
        assert blend_fraction(0, 5) == 0.0

    def test_negative_steps(self):
        assert blend_fraction(-3, 1) == 0.0

    def test_fraction(self):
        assert blend_fraction(10, 5) == 0.5
        assert blend_fraction(4, 1) == 0.25

    def test_clamped(self):
        assert blend_fraction(10, 20) == 1.0
        assert blend_fraction(10, -5) == 0.0


class TestBlendRgb:
    """Tests for blend_rgb()."""

    def test_endpoints(self):
        start = ColorTriplet(10, 20, 30)
        end = ColorTriplet(200, 100, 0)
        assert blend_rgb(start, end, 0.0) == start
        assert blend_rgb(start, end, 1.0) == end

    def test_midpoint_rounds_half_up(self):
        assert blend_rgb(ColorTriplet(0, 0, 0), ColorTriplet(255, 255, 255), 0.5) == (128, 128, 128)

    def test_descending_channel(self):
        assert blend_rgb(ColorTriplet(200, 0, 0), ColorTriplet(100, 0, 0), 0.5) == (150, 0, 0)

    def test_fraction_clamped(self):
        start = ColorTriplet(0, 0, 0)
        end = ColorTriplet(255, 255, 255)
        assert blend_rgb(start, end, 2.0) == end
        assert blend_rgb(start, end, -1.0) == start


class TestBlendHex:
    """Tests for blend_hex()."""

    @pytest.mark.parametrize("position,expected", [
        (0, "#000000"),
        (5, "#808080"),
        (10, "#ffffff"),
    ])
    def test_black_to_white(self, position, expected):
        assert blend_hex("#000000", "#ffffff", 10, position) == expected

    def test_short_hex_endpoints(self):
        assert blend_hex("#000", "#fff", 2, 2) == "#ffffff"

    def test_palette_endpoints(self):
        """Palette indices blend through their RGB values."""
        assert blend_hex("16", "231", 1, 1) == "#ffffff"

    def test_invalid_endpoint_is_black(self):
        assert blend_hex("nope", "#ffffff", 2, 0) == "#000000"
        assert blend_hex("#ffffff", "", 2, 2) == "#000000"
