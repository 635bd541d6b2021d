"""
Hue-based pipe colors.

Only the hue varies between pipes; saturation and lightness are fixed so all
pipes read as equally bright.
"""

from __future__ import annotations

import colorsys
from typing import Optional

import numpy as np

from pipeworks.common import ColorParams, Vector3
from pipeworks.common.vector import round_half_up

from .selectors import HueSelector, UniformHueSelector


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Vector3:
    """
    Convert HSL to RGB in [0, 1].

    Args:
        hue: Hue in degrees, wrapped into [0, 360)
        saturation: Saturation in percent
        lightness: Lightness in percent

    Returns:
        Vector3 of (r, g, b); each channel is quantized to an 8-bit value
        before being scaled back to [0, 1]
    """
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360.0) / 360.0, lightness / 100.0, saturation / 100.0
    )
    return Vector3.from_iterable(round_half_up(c * 255.0) / 255.0 for c in (r, g, b))


class ColorGenerator:
    """Generates RGB colors from injectable hues."""

    def __init__(
        self,
        hue_selector: Optional[HueSelector] = None,
        params: Optional[ColorParams] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.hue_selector = (
            hue_selector if hue_selector is not None else UniformHueSelector(rng)
        )
        self.params = params if params is not None else ColorParams()

    def generate_color(self) -> Vector3:
        """Generate a color as (r, g, b) with every channel in [0, 1]."""
        hue = float(self.hue_selector())
        return hsl_to_rgb(hue, self.params.saturation, self.params.lightness)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(selector={self.hue_selector!r})"
