"""
Tests for ColorGenerator.

Tests for pipeworks/generators/colors.py
"""

from __future__ import annotations

import colorsys

import pytest

from pipeworks.common import ColorParams
from pipeworks.generators import ColorGenerator, hsl_to_rgb


def _hsl_of(color):
    h, l, s = colorsys.rgb_to_hls(*color.as_tuple())
    return h * 360.0, s * 100.0, l * 100.0


class TestHslToRgb:
    """Test hsl_to_rgb."""

    @pytest.mark.parametrize(
        "hue, expected",
        [
            (0, (1.0, 26 / 255, 26 / 255)),
            (120, (26 / 255, 1.0, 26 / 255)),
            (240, (26 / 255, 26 / 255, 1.0)),
        ],
    )
    def test_primary_hues(self, hue, expected):
        """Test primaries at full saturation and 55% lightness."""
        assert hsl_to_rgb(hue, 100, 55).is_close(expected, atol=1e-9)

    def test_channels_are_8_bit_quantized(self):
        """Test every channel is k / 255 for an integer k."""
        for channel in hsl_to_rgb(77.7, 100, 55):
            assert channel * 255 == pytest.approx(round(channel * 255))

    def test_hue_wraps(self):
        """Test 360 is the same as 0."""
        assert hsl_to_rgb(360, 100, 55) == hsl_to_rgb(0, 100, 55)

    def test_grey_when_unsaturated(self):
        """Test zero saturation gives equal channels."""
        r, g, b = hsl_to_rgb(200, 0, 50)
        assert r == g == b


class TestColorGenerator:
    """Test ColorGenerator."""

    def test_uses_supplied_hue(self):
        """Test the hue selector drives the color."""
        color = ColorGenerator(lambda: 180).generate_color()
        hue, _, _ = _hsl_of(color)
        assert hue == pytest.approx(180)

    def test_constant_saturation_and_lightness(self):
        """Test saturation and lightness do not vary between runs."""
        generator = ColorGenerator(lambda: 180)
        first, second = (_hsl_of(generator.generate_color()) for _ in range(2))
        assert first[1] == second[1]
        assert first[2] == second[2]

    def test_random_colors_share_lightness(self, rng):
        """Test default hues still keep lightness near 55%."""
        generator = ColorGenerator(rng=rng)
        for _ in range(20):
            _, saturation, lightness = _hsl_of(generator.generate_color())
            assert lightness == pytest.approx(55, abs=0.5)
            assert saturation == pytest.approx(100, abs=1.0)

    def test_channels_in_unit_interval(self, rng):
        """Test every channel is in [0, 1]."""
        generator = ColorGenerator(rng=rng)
        for _ in range(20):
            assert all(0.0 <= c <= 1.0 for c in generator.generate_color())

    def test_custom_params(self):
        """Test configured lightness is honoured."""
        color = ColorGenerator(lambda: 0, ColorParams(lightness=0)).generate_color()
        assert color.as_tuple() == (0.0, 0.0, 0.0)

    def test_hue_selector_called_once_per_color(self):
        """Test one hue per color."""
        calls = []
        generator = ColorGenerator(lambda: calls.append(1) or 90)
        generator.generate_color()
        generator.generate_color()
        assert len(calls) == 2
