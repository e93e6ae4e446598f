"""
Unit tests for color space conversion and gamut handling.
"""
import pytest

from workspace_tint.color.convert import (
    LinearRgb,
    Oklch,
    clamp_to_gamut,
    hex_to_oklch,
    hex_to_rgb,
    is_in_gamut,
    is_valid_hex,
    linear_rgb_to_hex,
    max_chroma,
    oklch_to_hex,
    oklch_to_linear_rgb,
    rgb_to_hex,
)
from workspace_tint.color.hue import hue_distance
from workspace_tint.errors import InvalidColorError


class TestHex:
    """Test hex parsing and emission."""

    def test_parse_with_and_without_hash(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    @pytest.mark.parametrize("value", ["#fff", "#12345g", "", "1234567", None, 0x123456])
    def test_invalid_hex_raises(self, value):
        with pytest.raises(InvalidColorError):
            hex_to_rgb(value)

    def test_invalid_color_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_oklch("nope")

    def test_is_valid_hex(self):
        assert is_valid_hex("#a1B2c3")
        assert is_valid_hex("a1b2c3")
        assert not is_valid_hex("#a1b2c")
        assert not is_valid_hex(None)

    def test_rgb_to_hex_is_lowercase(self):
        assert rgb_to_hex(255, 171, 0) == "#ffab00"

    def test_emission_clamps_channels(self):
        assert linear_rgb_to_hex(LinearRgb(1.5, -0.2, 1.0)) == "#ff00ff"


class TestOklch:
    """Test OKLCH conversions."""

    def test_white_and_black(self):
        assert oklch_to_hex(Oklch(1.0, 0.0, 0.0)) == "#ffffff"
        assert oklch_to_hex(Oklch(0.0, 0.0, 0.0)) == "#000000"

    def test_white_has_full_lightness_and_no_chroma(self):
        white = hex_to_oklch("#FFFFFF")
        assert white.l == pytest.approx(1.0, abs=1e-3)
        assert white.c < 1e-3

    @pytest.mark.parametrize(
        "hex_color", ["#1e1e1e", "#007acc", "#ff8000", "#8b949e", "#fdf6e3", "#123456"]
    )
    def test_hex_round_trip(self, hex_color):
        assert oklch_to_hex(hex_to_oklch(hex_color)) == hex_color

    @pytest.mark.parametrize("lightness", [0.4, 0.6, 0.75])
    @pytest.mark.parametrize("hue", [0, 45, 90, 180, 270])
    def test_oklch_round_trip_within_quantization(self, lightness, hue):
        expected = Oklch(lightness, max_chroma(lightness, hue) * 0.5, hue)
        result = hex_to_oklch(oklch_to_hex(expected))
        assert result.l == pytest.approx(expected.l, abs=1e-2)
        assert result.c == pytest.approx(expected.c, abs=1e-2)
        assert hue_distance(result.h, expected.h) < 10

    def test_hue_is_normalized(self):
        for hex_color in ("#ff0000", "#00ff00", "#0000ff", "#ff00ff"):
            assert 0 <= hex_to_oklch(hex_color).h < 360


class TestGamut:
    """Test gamut testing, clamping and max chroma search."""

    def test_clamp_reduces_only_chroma(self):
        color = Oklch(0.6, 0.4, 140)
        clamped = clamp_to_gamut(color)
        assert clamped.l == color.l
        assert clamped.h == color.h
        assert clamped.c < color.c
        assert is_in_gamut(oklch_to_linear_rgb(clamped))

    def test_clamp_is_idempotent(self):
        for color in (Oklch(0.6, 0.4, 140), Oklch(0.3, 0.2, 300), Oklch(0.9, 0.3, 90)):
            once = clamp_to_gamut(color)
            assert clamp_to_gamut(once) == once

    def test_clamp_leaves_in_gamut_color_unchanged(self):
        color = Oklch(0.5, 0.02, 250)
        assert clamp_to_gamut(color) == color

    def test_clamp_extreme_lightness(self):
        assert clamp_to_gamut(Oklch(-0.1, 0.2, 50)) == Oklch(0.0, 0.0, 50)
        assert clamp_to_gamut(Oklch(1.2, 0.2, 50)) == Oklch(1.0, 0.0, 50)

    def test_clamp_zero_chroma_unchanged(self):
        color = Oklch(0.5, 0.0, 10)
        assert clamp_to_gamut(color) is color

    def test_max_chroma_at_lightness_bounds(self):
        assert max_chroma(0, 120) == 0.0
        assert max_chroma(1, 120) == 0.0

    @pytest.mark.parametrize("lightness", [0.2, 0.5, 0.8])
    @pytest.mark.parametrize("hue", [0, 30, 110, 200, 265, 330])
    def test_max_chroma_is_gamut_boundary(self, lightness, hue):
        c = max_chroma(lightness, hue)
        assert c > 0
        boundary = Oklch(lightness, c, hue)
        assert is_in_gamut(oklch_to_linear_rgb(boundary))
        assert clamp_to_gamut(boundary) == boundary
        assert is_valid_hex(oklch_to_hex(boundary))
        assert not is_in_gamut(oklch_to_linear_rgb(Oklch(lightness, c + 0.01, hue)))
